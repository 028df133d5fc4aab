"""Static lookup tables: the show catalog, the subject set and count bounds."""

from dataclasses import dataclass

VALID_SUBJECTS: tuple[str, ...] = (
    "character",
    "relationship",
    "plot",
    "setting",
    "theme",
    "episode",
    "season",
    "overall",
    "mood",
    "location",
    "genre",
    "conflict",
    "emotion",
    "symbol",
)

MIN_EMOJI_COUNT = 1
MAX_EMOJI_COUNT = 30

# Sorted case-insensitively, no duplicates.
TV_SHOWS: tuple[str, ...] = (
    "30 Rock",
    "Abbott Elementary",
    "Andor",
    "Arcane",
    "Arrested Development",
    "Atlanta",
    "Avatar: The Last Airbender",
    "Band of Brothers",
    "Barry",
    "Battlestar Galactica",
    "Better Call Saul",
    "Big Little Lies",
    "Black Mirror",
    "Bluey",
    "Boardwalk Empire",
    "Bob's Burgers",
    "BoJack Horseman",
    "Bones",
    "Breaking Bad",
    "Bridgerton",
    "Brooklyn Nine-Nine",
    "Buffy the Vampire Slayer",
    "Castle",
    "Cheers",
    "Chernobyl",
    "Cobra Kai",
    "Columbo",
    "Community",
    "Cowboy Bebop",
    "Criminal Minds",
    "CSI: Crime Scene Investigation",
    "Curb Your Enthusiasm",
    "Daredevil",
    "Dark",
    "Deadwood",
    "Dexter",
    "Doctor Who",
    "Downton Abbey",
    "Euphoria",
    "Fargo",
    "Fawlty Towers",
    "Firefly",
    "Fleabag",
    "Frasier",
    "Fresh Prince of Bel-Air",
    "Friday Night Lights",
    "Friends",
    "Futurama",
    "Game of Thrones",
    "Gilmore Girls",
    "Glee",
    "Gossip Girl",
    "Gravity Falls",
    "Grey's Anatomy",
    "Hacks",
    "Hannibal",
    "Happy Days",
    "Heartstopper",
    "Homeland",
    "House",
    "House of Cards",
    "House of the Dragon",
    "How I Met Your Mother",
    "I Love Lucy",
    "It's Always Sunny in Philadelphia",
    "Jane the Virgin",
    "Killing Eve",
    "Law & Order",
    "Loki",
    "Lost",
    "Lucifer",
    "Luther",
    "M*A*S*H",
    "Mad Men",
    "Malcolm in the Middle",
    "Mare of Easttown",
    "Midnight Mass",
    "Mindhunter",
    "Modern Family",
    "Money Heist",
    "Monk",
    "Mr. Robot",
    "Narcos",
    "NCIS",
    "New Girl",
    "Normal People",
    "Only Murders in the Building",
    "Orange Is the New Black",
    "Outlander",
    "Ozark",
    "Parks and Recreation",
    "Peaky Blinders",
    "Poker Face",
    "Pose",
    "Prison Break",
    "Reacher",
    "Reservation Dogs",
    "Rick and Morty",
    "Schitt's Creek",
    "Scrubs",
    "Seinfeld",
    "Sense8",
    "Severance",
    "Sex and the City",
    "Shameless",
    "Sherlock",
    "Silicon Valley",
    "Six Feet Under",
    "Slow Horses",
    "Smallville",
    "Sons of Anarchy",
    "South Park",
    "Spartacus",
    "Squid Game",
    "Star Trek: Deep Space Nine",
    "Star Trek: The Next Generation",
    "Star Trek: The Original Series",
    "Star Trek: Voyager",
    "Stranger Things",
    "Succession",
    "Suits",
    "Supernatural",
    "Ted Lasso",
    "The Americans",
    "The Bear",
    "The Big Bang Theory",
    "The Boys",
    "The Crown",
    "The Expanse",
    "The Good Place",
    "The Good Wife",
    "The Handmaid's Tale",
    "The Last of Us",
    "The Leftovers",
    "The Mandalorian",
    "The Marvelous Mrs. Maisel",
    "The Office",
    "The Queen's Gambit",
    "The Simpsons",
    "The Sopranos",
    "The Twilight Zone",
    "The Umbrella Academy",
    "The Walking Dead",
    "The West Wing",
    "The White Lotus",
    "The Wire",
    "The Witcher",
    "The Wonder Years",
    "The X-Files",
    "This Is Us",
    "True Blood",
    "True Detective",
    "Twin Peaks",
    "Unbreakable Kimmy Schmidt",
    "Veep",
    "Vikings",
    "WandaVision",
    "Wednesday",
    "Westworld",
    "What We Do in the Shadows",
    "Yellowjackets",
    "Yellowstone",
    "You",
)


@dataclass(frozen=True)
class Catalog:
    """Read-only bundle of the show names and subjects used for validation."""

    shows: tuple[str, ...] = TV_SHOWS
    subjects: tuple[str, ...] = VALID_SUBJECTS

    def find_show(self, name: str) -> str | None:
        """Return the catalog spelling of ``name`` (case-insensitive), if listed."""
        wanted = name.strip().lower()
        for show in self.shows:
            if show.lower() == wanted:
                return show
        return None


DEFAULT_CATALOG = Catalog()
