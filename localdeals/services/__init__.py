"""Services package - marketplace business logic."""
