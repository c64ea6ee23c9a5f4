"""
Seed records for the in-memory stores.

Dependencies: None
System role: Demo data loaded at application start
"""

SEED_USERS = [
    {"id": 1, "name": "John Doe", "email": "john@example.com", "created": "2024-01-15", "updated": "2024-01-15"},
    {"id": 2, "name": "Jane Smith", "email": "jane@example.com", "created": "2024-02-20", "updated": "2024-02-20"},
    {"id": 3, "name": "Bob Johnson", "email": "bob@example.com", "created": "2024-03-10", "updated": "2024-03-10"},
    {"id": 4, "name": "Alice Brown", "email": "alice@example.com", "created": "2024-04-05", "updated": "2024-04-05"},
    {"id": 5, "name": "Charlie Wilson", "email": "charlie@example.com", "created": "2024-05-12", "updated": "2024-05-12"},
]

SEED_COURSES = [
    {
        "id": 1,
        "title": "Introduction to TypeScript",
        "description": "Learn the basics of TypeScript programming",
        "instructor": "John Smith",
        "duration": 40,
        "level": "beginner",
        "created": "2024-01-10",
        "updated": "2024-01-15",
    },
    {
        "id": 2,
        "title": "Advanced Node.js",
        "description": "Master advanced Node.js concepts and patterns",
        "instructor": "Jane Doe",
        "duration": 60,
        "level": "advanced",
        "created": "2024-02-01",
        "updated": "2024-02-05",
    },
    {
        "id": 3,
        "title": "React Fundamentals",
        "description": "Build modern web applications with React",
        "instructor": "Bob Wilson",
        "duration": 50,
        "level": "intermediate",
        "created": "2024-03-01",
        "updated": "2024-03-10",
    },
]
