# =============================================================================
# core/services/seed_data.py - Built-in Catalog Fixture
# =============================================================================
# The albums the catalog starts with. Every process restart resets the
# catalog to exactly this list.
# =============================================================================

SEED_ALBUMS: list[dict] = [
    {
        "id": 1,
        "band": "Metallica",
        "title": "Master of Puppets",
        "year": 1986,
        "genre": "Thrash Metal",
        "cover": "https://upload.wikimedia.org/wikipedia/en/b/b2/Metallica_-_Master_of_Puppets_cover.jpg",
    },
    {
        "id": 2,
        "band": "Metallica",
        "title": "Ride the Lightning",
        "year": 1984,
        "genre": "Thrash Metal",
        "cover": "https://upload.wikimedia.org/wikipedia/en/f/f4/Ridetl.png",
    },
    {
        "id": 3,
        "band": "AC/DC",
        "title": "Back in Black",
        "year": 1980,
        "genre": "Hard Rock",
        "cover": "https://upload.wikimedia.org/wikipedia/commons/thumb/9/92/ACDC_Back_in_Black.png/500px-ACDC_Back_in_Black.png",
    },
    {
        "id": 4,
        "band": "AC/DC",
        "title": "Highway to Hell",
        "year": 1979,
        "genre": "Hard Rock",
        "cover": "https://upload.wikimedia.org/wikipedia/en/a/ac/Acdc_Highway_to_Hell.JPG",
    },
    {
        "id": 5,
        "band": "Iron Maiden",
        "title": "The Number of the Beast",
        "year": 1982,
        "genre": "Heavy Metal",
        "cover": "https://upload.wikimedia.org/wikipedia/en/3/32/Iron_Maiden_-_The_Number_of_the_Beast.jpg",
    },
    {
        "id": 6,
        "band": "Judas Priest",
        "title": "British Steel",
        "year": 1980,
        "genre": "Heavy Metal",
        "cover": "https://upload.wikimedia.org/wikipedia/en/a/a4/Judas_Priest_-_British_Steel.jpg",
    },
    {
        "id": 7,
        "band": "Led Zeppelin",
        "title": "Led Zeppelin IV",
        "year": 1971,
        "genre": "Rock",
        "cover": "https://upload.wikimedia.org/wikipedia/en/2/26/Led_Zeppelin_-_Led_Zeppelin_IV.jpg",
    },
    {
        "id": 8,
        "band": "Pink Floyd",
        "title": "The Dark Side of the Moon",
        "year": 1973,
        "genre": "Progressive Rock",
        "cover": "https://upload.wikimedia.org/wikipedia/en/3/3b/Dark_Side_of_the_Moon.png",
    },
]
