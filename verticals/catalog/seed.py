"""Sample catalog loaded on startup when seeding is enabled."""

SAMPLE_BOOKS: list[dict] = [
    {
        "title": "The Pragmatic Programmer",
        "author": "Andrew Hunt, David Thomas",
        "year": 1999,
        "genre": "Programming",
    },
    {
        "title": "Clean Code",
        "author": "Robert C. Martin",
        "year": 2008,
        "genre": "Programming",
    },
    {
        "title": "Design Patterns",
        "author": "Gang of Four",
        "year": 1994,
        "genre": "Software Engineering",
    },
]
