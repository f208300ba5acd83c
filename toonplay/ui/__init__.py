"""HTTP playground."""
