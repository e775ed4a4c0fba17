"""Application services: scaffolding and the release helper."""
