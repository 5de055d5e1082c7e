"""Fake Catrobat identity server used for hermetic tests and local development."""
