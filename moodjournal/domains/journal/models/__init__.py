from moodjournal.domains.journal.models.entry import Entry

__all__ = ["Entry"]
