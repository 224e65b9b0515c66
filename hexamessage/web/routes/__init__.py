"""Routes HTTP de HexaMessage."""
