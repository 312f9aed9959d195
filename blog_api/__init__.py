"""Blog post CRUD API."""
