"""Services: orchestrate repository IO around the pure core."""
