"""Daily billings log package."""
