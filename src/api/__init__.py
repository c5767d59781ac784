"""GraphQL API serving library graphs to the frontend."""
