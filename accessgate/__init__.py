"""Access decision service for the credit-repair platform."""
