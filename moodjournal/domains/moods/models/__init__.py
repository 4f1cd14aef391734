from moodjournal.domains.moods.models.mood_log import MoodLog

__all__ = ["MoodLog"]
