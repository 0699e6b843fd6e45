"""Mock data API backing the business dashboard during development."""
