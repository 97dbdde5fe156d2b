"""Domain layer: OTP engine, email sender contract and user store protocol."""
