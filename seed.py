# Built-in problems served when no PROBLEMS_PATH is configured.
# Keys use the wire (camelCase) names so the same shape works for JSON seed files.

PROBLEMS = [
    {
        "id": "68dd3fb4e6adc62510431120",
        "title": "Apple Basket",
        "story": (
            "Sarah has 5 apples in her basket. Her friend gives her 3 more apples. "
            "How many apples does Sarah have now?"
        ),
        "difficulty": "easy",
        "correctAnswer": 8,
        "steps": ["Start with 5 apples", "Add 3 more apples", "5 + 3 = 8 apples total"],
        "visualType": "apples",
        "initialCount": 5,
        "addCount": 3,
        "operation": "addition",
        "createdAt": "2025-10-01T14:50:28.568Z",
    },
    {
        "id": "68dd3fb4e6adc62510431121",
        "title": "Cookie Jar",
        "story": (
            "Mom baked 12 cookies. The family ate 7 cookies. "
            "How many cookies are left in the jar?"
        ),
        "difficulty": "easy",
        "correctAnswer": 5,
        "steps": [
            "Start with 12 cookies",
            "Subtract 7 cookies that were eaten",
            "12 - 7 = 5 cookies remaining",
        ],
        "visualType": "cookies",
        "initialCount": 12,
        "removeCount": 7,
        "operation": "subtraction",
        "createdAt": "2025-10-01T14:50:28.573Z",
    },
    {
        "id": "68dd3fb4e6adc62510431122",
        "title": "Toy Cars",
        "story": (
            "Tim has 4 toy cars. He gets 2 cars for his birthday and 3 more from his grandma. "
            "How many toy cars does Tim have in total?"
        ),
        "difficulty": "medium",
        "correctAnswer": 9,
        "steps": [
            "Start with 4 toy cars",
            "Add 2 cars from birthday",
            "Add 3 cars from grandma",
            "4 + 2 + 3 = 9 toy cars",
        ],
        "visualType": "cars",
        "initialCount": 4,
        "addCount": 5,  # 2 + 3
        "operation": "addition",
        "createdAt": "2025-10-01T14:50:28.575Z",
    },
    {
        "id": "68dd3fb4e6adc62510431123",
        "title": "Gift Boxes",
        "story": (
            "Emma wrapped 15 gift boxes. She gave away 6 boxes to her friends and 4 boxes "
            "to her family. How many gift boxes does she have left?"
        ),
        "difficulty": "medium",
        "correctAnswer": 5,
        "steps": [
            "Start with 15 gift boxes",
            "Subtract 6 boxes given to friends",
            "Subtract 4 boxes given to family",
            "15 - 6 - 4 = 5 gift boxes left",
        ],
        "visualType": "gifts",
        "initialCount": 15,
        "removeCount": 10,  # 6 + 4
        "operation": "subtraction",
        "createdAt": "2025-10-01T14:50:28.576Z",
    },
]
