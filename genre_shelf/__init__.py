"""Genre Shelf: a small book catalogue filtered by exact genre."""
