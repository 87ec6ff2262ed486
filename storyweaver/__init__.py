"""Storyweaver - personalized children's story generation."""
