"""Identity service: OAuth login, session tokens and refresh tokens."""
