"""HTTP API for Storyweaver."""
