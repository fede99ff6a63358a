"""OData query node model for odatasql."""
