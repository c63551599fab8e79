"""API endpoint modules, one router per resource."""
