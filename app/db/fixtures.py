"""Начальные данные, которыми заполняется пустое хранилище"""

USERS = [
    {
        "id": "1",
        "name": "Admin User",
        "email": "admin@example.com",
        "role": "admin",
        "avatar": "https://api.dicebear.com/7.x/avataaars/svg?seed=admin"
    },
    {
        "id": "2",
        "name": "Editor User",
        "email": "editor@example.com",
        "role": "editor",
        "avatar": "https://api.dicebear.com/7.x/avataaars/svg?seed=editor"
    },
    {
        "id": "3",
        "name": "Viewer User",
        "email": "viewer@example.com",
        "role": "viewer",
        "avatar": "https://api.dicebear.com/7.x/avataaars/svg?seed=viewer"
    }
]

DOCUMENTS = [
    {
        "id": "1",
        "title": "Getting Started Guide",
        "content": "This is a guide to help you get started with our system.",
        "createdBy": "1",
        "createdAt": "2024-04-01T10:00:00Z",
        "updatedAt": "2024-04-01T10:00:00Z",
        "type": "pdf",
        "size": 1024,
        "status": "published"
    },
    {
        "id": "2",
        "title": "API Documentation",
        "content": "Comprehensive API documentation for developers.",
        "createdBy": "2",
        "createdAt": "2024-04-02T14:30:00Z",
        "updatedAt": "2024-04-03T09:15:00Z",
        "type": "docx",
        "size": 2048,
        "status": "published"
    },
    {
        "id": "3",
        "title": "Internal Processes",
        "content": "Documentation of internal company processes.",
        "createdBy": "1",
        "createdAt": "2024-04-05T16:20:00Z",
        "updatedAt": "2024-04-10T11:45:00Z",
        "type": "pdf",
        "size": 3072,
        "status": "draft"
    }
]

QUESTIONS = [
    {
        "id": "1",
        "title": "How do I upload a new document?",
        "content": "I'm trying to upload a new document but can't find the right button.",
        "askedBy": "3",
        "askedAt": "2024-04-10T09:00:00Z",
        "status": "answered",
        "answers": [
            {
                "id": "a1",
                "content": "Click on the '+ New Document' button in the top right of the documents page.",
                "answeredBy": "1",
                "answeredAt": "2024-04-10T10:30:00Z"
            }
        ]
    },
    {
        "id": "2",
        "title": "Can I change document permissions?",
        "content": "I need to restrict access to a specific document to certain users.",
        "askedBy": "2",
        "askedAt": "2024-04-11T14:20:00Z",
        "status": "unanswered",
        "documentId": "2",
        "answers": []
    }
]

DEFAULT_FIXTURES = {
    "users": USERS,
    "documents": DOCUMENTS,
    "questions": QUESTIONS,
}
