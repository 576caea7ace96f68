"""Catalog documents shared by the fixtures and the assertions."""

PASSWORD = "s3cret-passw0rd"

THRILLER = {
    "name": "Thriller",
    "description": "Suspense and tension from start to finish.",
}

DRAMA = {
    "name": "Drama",
    "description": "Character driven stories.",
}

DEMME = {
    "name": "Jonathan Demme",
    "bio": "American director, producer and screenwriter.",
    "birth": "1944-02-22",
    "death": "2017-04-26",
}

DARABONT = {
    "name": "Frank Darabont",
    "bio": "Director known for Stephen King adaptations.",
    "birth": "1959-01-28",
    "death": None,
}

ACTION_THRILLER = {
    "name": "Action/Thriller",
    "description": "Chases and shootouts with a twist.",
}

WOO = {
    "name": "John Woo",
    "bio": "Hong Kong director of stylised action films.",
    "birth": "1946-05-01",
    "death": None,
}
