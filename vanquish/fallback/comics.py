"""Bundled sample comics served when the comics provider is unavailable."""
from __future__ import annotations

from typing import List

COMICS: List[dict] = [
    {
        "id": 1,
        "title": "The Amazing Spider-Man",
        "issueNumber": "1",
        "description": "<p>Marvel's friendly neighborhood hero faces the Chameleon and a skeptical J. Jonah Jameson.</p>",
        "coverImageUrl": "https://placehold.co/400x600/b91c1c/ffffff?text=Amazing+Spider-Man+1",
        "releaseDate": "1963-03-01",
        "creators": {"writer": ["Stan Lee"], "artist": ["Steve Ditko"], "coverArtist": ["Jack Kirby"]},
        "featuredCharacters": [{"id": 3, "name": "Spider-Man"}],
        "downloadLinks": {},
        "additionalInfo": {"Publisher": "Marvel Comics", "Year": "1963"},
    },
    {
        "id": 2,
        "title": "Batman: Year One",
        "issueNumber": "404",
        "description": "<p>A retelling of Bruce Wayne's first year as Batman and James Gordon's arrival in Gotham, published by DC.</p>",
        "coverImageUrl": "https://placehold.co/400x600/1f2937/ffffff?text=Batman+Year+One",
        "releaseDate": "1987-02-01",
        "creators": {"writer": ["Frank Miller"], "artist": ["David Mazzucchelli"], "coverArtist": ["David Mazzucchelli"]},
        "featuredCharacters": [{"id": 1, "name": "Batman"}],
        "downloadLinks": {},
        "additionalInfo": {"Publisher": "DC Comics", "Year": "1987"},
    },
    {
        "id": 3,
        "title": "Watchmen",
        "issueNumber": "1",
        "description": "<p>In an alternate 1985 the murder of a government-sanctioned hero uncovers a conspiracy. A DC landmark series.</p>",
        "coverImageUrl": "https://placehold.co/400x600/facc15/111827?text=Watchmen",
        "releaseDate": "1986-09-01",
        "creators": {"writer": ["Alan Moore"], "artist": ["Dave Gibbons"], "coverArtist": ["Dave Gibbons"]},
        "featuredCharacters": [],
        "downloadLinks": {},
        "additionalInfo": {"Publisher": "DC Comics", "Year": "1986"},
    },
    {
        "id": 4,
        "title": "The Infinity Gauntlet",
        "issueNumber": "1",
        "description": "<p>Thanos gathers the Infinity Gems and the heroes of the Marvel Universe unite against him.</p>",
        "coverImageUrl": "https://placehold.co/400x600/7c3aed/ffffff?text=Infinity+Gauntlet",
        "releaseDate": "1991-07-01",
        "creators": {"writer": ["Jim Starlin"], "artist": ["George Perez", "Ron Lim"], "coverArtist": ["George Perez"]},
        "featuredCharacters": [{"id": 14, "name": "Silver Surfer"}, {"id": 7, "name": "Thor"}],
        "downloadLinks": {},
        "additionalInfo": {"Publisher": "Marvel Comics", "Year": "1991"},
    },
    {
        "id": 5,
        "title": "All-Star Superman",
        "issueNumber": "1",
        "description": "<p>Poisoned by solar radiation, Superman sets out to complete twelve final labors. From DC's All-Star line.</p>",
        "coverImageUrl": "https://placehold.co/400x600/2563eb/ffffff?text=All-Star+Superman",
        "releaseDate": "2005-11-01",
        "creators": {"writer": ["Grant Morrison"], "artist": ["Frank Quitely"], "coverArtist": ["Frank Quitely"]},
        "featuredCharacters": [{"id": 2, "name": "Superman"}],
        "downloadLinks": {},
        "additionalInfo": {"Publisher": "DC Comics", "Year": "2005"},
    },
    {
        "id": 6,
        "title": "Saga",
        "issueNumber": "1",
        "description": "<p>Two soldiers from warring worlds fall in love and go on the run with their newborn daughter. Published by Image Comics.</p>",
        "coverImageUrl": "https://placehold.co/400x600/0f766e/ffffff?text=Saga",
        "releaseDate": "2012-03-01",
        "creators": {"writer": ["Brian K. Vaughan"], "artist": ["Fiona Staples"], "coverArtist": ["Fiona Staples"]},
        "featuredCharacters": [],
        "downloadLinks": {},
        "additionalInfo": {"Publisher": "Image Comics", "Year": "2012"},
    },
    {
        "id": 7,
        "title": "Invincible",
        "issueNumber": "1",
        "description": "<p>Mark Grayson inherits his father's powers and learns what being a hero costs. An Image Comics series.</p>",
        "coverImageUrl": "https://placehold.co/400x600/1d4ed8/facc15?text=Invincible",
        "releaseDate": "2003-01-01",
        "creators": {"writer": ["Robert Kirkman"], "artist": ["Cory Walker"], "coverArtist": ["Cory Walker"]},
        "featuredCharacters": [],
        "downloadLinks": {},
        "additionalInfo": {"Publisher": "Image Comics", "Year": "2003"},
    },
    {
        "id": 8,
        "title": "Iron Man: Extremis",
        "issueNumber": "1",
        "description": "<p>Tony Stark confronts a techno-organic virus and rebuilds his armor from the inside out in this Marvel arc.</p>",
        "coverImageUrl": "https://placehold.co/400x600/dc2626/facc15?text=Extremis",
        "releaseDate": "2005-01-01",
        "creators": {"writer": ["Warren Ellis"], "artist": ["Adi Granov"], "coverArtist": ["Adi Granov"]},
        "featuredCharacters": [{"id": 5, "name": "Iron Man"}],
        "downloadLinks": {},
        "additionalInfo": {"Publisher": "Marvel Comics", "Year": "2005"},
    },
    {
        "id": 9,
        "title": "Wonder Woman",
        "issueNumber": "1",
        "description": "<p>Diana of Themyscira leaves Paradise Island to carry a message of peace to the world of men. A DC relaunch.</p>",
        "coverImageUrl": "https://placehold.co/400x600/b91c1c/facc15?text=Wonder+Woman",
        "releaseDate": "1987-02-01",
        "creators": {"writer": ["George Perez", "Greg Potter"], "artist": ["George Perez"], "coverArtist": ["George Perez"]},
        "featuredCharacters": [{"id": 4, "name": "Wonder Woman"}],
        "downloadLinks": {},
        "additionalInfo": {"Publisher": "DC Comics", "Year": "1987"},
    },
    {
        "id": 10,
        "title": "Daredevil: Born Again",
        "issueNumber": "227",
        "description": "<p>The Kingpin learns Daredevil's secret identity and sets out to destroy Matt Murdock. A Marvel classic.</p>",
        "coverImageUrl": "https://placehold.co/400x600/991b1b/ffffff?text=Born+Again",
        "releaseDate": "1986-02-01",
        "creators": {"writer": ["Frank Miller"], "artist": ["David Mazzucchelli"], "coverArtist": ["David Mazzucchelli"]},
        "featuredCharacters": [],
        "downloadLinks": {},
        "additionalInfo": {"Publisher": "Marvel Comics", "Year": "1986"},
    },
    {
        "id": 11,
        "title": "The Flash: Rebirth",
        "issueNumber": "1",
        "description": "<p>Barry Allen returns to the Speed Force and the DC Universe races to catch up.</p>",
        "coverImageUrl": "https://placehold.co/400x600/dc2626/fde047?text=Flash+Rebirth",
        "releaseDate": "2009-04-01",
        "creators": {"writer": ["Geoff Johns"], "artist": ["Ethan Van Sciver"], "coverArtist": ["Ethan Van Sciver"]},
        "featuredCharacters": [{"id": 6, "name": "The Flash"}],
        "downloadLinks": {},
        "additionalInfo": {"Publisher": "DC Comics", "Year": "2009"},
    },
    {
        "id": 12,
        "title": "Spawn",
        "issueNumber": "1",
        "description": "<p>Al Simmons returns from Hell as a Hellspawn bound to Malebolgia. The book that launched Image Comics.</p>",
        "coverImageUrl": "https://placehold.co/400x600/111827/16a34a?text=Spawn",
        "releaseDate": "1992-05-01",
        "creators": {"writer": ["Todd McFarlane"], "artist": ["Todd McFarlane"], "coverArtist": ["Todd McFarlane"]},
        "featuredCharacters": [],
        "downloadLinks": {},
        "additionalInfo": {"Publisher": "Image Comics", "Year": "1992"},
    },
]
