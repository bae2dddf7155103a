"""Infrastructure - store session management and logging setup (the imperative shell)."""
