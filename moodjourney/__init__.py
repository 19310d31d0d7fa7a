"""MoodJourney backend: mood analysis, history and emotional support API."""
