# ABOUTME: Bookarchive - a local catalog manager for books and their physical copies.
# ABOUTME: Tracks copies per book, shelf locations, history, and availability.
