"""Kedjora agency site: public content API, admin area and session auth."""
