"""FitTrack: fitness tracking REST API."""
