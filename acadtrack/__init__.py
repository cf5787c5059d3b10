"""AcadTrack: academic activity tracker API and client."""

__version__ = "0.1.0"
