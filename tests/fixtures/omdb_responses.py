"""
Mock OMDb API responses for testing.

Realistic bodies returned by GET http://www.omdbapi.com/?apikey=...&t=...
These fixtures are used with respx to mock httpx calls in tests.
"""

# GET /?t=The Matrix&y=1999
OMDB_MATRIX_RESPONSE = {
    "Title": "The Matrix",
    "Year": "1999",
    "Rated": "R",
    "Released": "31 Mar 1999",
    "Runtime": "136 min",
    "Genre": "Action, Sci-Fi",
    "Director": "Lana Wachowski, Lilly Wachowski",
    "Poster": "https://m.media-amazon.com/images/M/MV5BNzQzOTk3OTAtNDQ0Zi00ZTVkLWI0MTEtMDllZjNkYzNjNTc4L2ltYWdlXkEyXkFqcGdeQXVyNjU0OTQ0OTY@._V1_SX300.jpg",
    "imdbID": "tt0133093",
    "Type": "movie",
    "Response": "True",
}

# GET /?t=Inception&y=2010
OMDB_INCEPTION_RESPONSE = {
    "Title": "Inception",
    "Year": "2010",
    "Poster": "https://m.media-amazon.com/images/M/MV5BMjAxMzY3NjcxNF5BMl5BanBnXkFtZTcwNTI5OTM0Mw@@._V1_SX300.jpg",
    "imdbID": "tt1375666",
    "Type": "movie",
    "Response": "True",
}

# Series: Year is a range, not a number
OMDB_SERIES_RESPONSE = {
    "Title": "Breaking Bad",
    "Year": "2008–2013",
    "Poster": "https://m.media-amazon.com/images/M/breaking_bad.jpg",
    "Type": "series",
    "Response": "True",
}

# Movie without poster
OMDB_NO_POSTER_RESPONSE = {
    "Title": "Obscure Short",
    "Year": "1987",
    "Poster": "N/A",
    "Response": "True",
}

# Explicit no-match
OMDB_NOT_FOUND_RESPONSE = {
    "Response": "False",
    "Error": "Movie not found!",
}

# Invalid key
OMDB_INVALID_KEY_RESPONSE = {
    "Response": "False",
    "Error": "Invalid API key!",
}
