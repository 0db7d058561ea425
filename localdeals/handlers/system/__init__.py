"""System handlers - liveness and health."""
