"""
Curated local tier of the myth library.

Keys are lowercase names; CULTURE_TERMS lists the names browsed per culture
(some of them are not in LOCAL_FIGURES and resolve remotely).
"""
from typing import Dict, List, Optional

from mythdetector.models import Provenance, ReferenceEntry, normalize_label


def _figure(name: str, culture: str, description: str, *related: str) -> ReferenceEntry:
    return ReferenceEntry(
        name=name,
        culture=culture,
        description=description,
        related_names=tuple(related),
        provenance=Provenance.LOCAL,
    )


LOCAL_FIGURES: Dict[str, ReferenceEntry] = {
    # Greek
    "zeus": _figure("Zeus", "Greek", "King of the gods, ruler of Mount Olympus. Wields the thunderbolt.",
                    "Hera", "Poseidon", "Hades", "Athena"),
    "hera": _figure("Hera", "Greek", "Queen of the gods, goddess of marriage and family.",
                    "Zeus", "Ares", "Hephaestus"),
    "poseidon": _figure("Poseidon", "Greek", "God of the sea, earthquakes, and horses. Wields a trident.",
                        "Zeus", "Hades", "Amphitrite"),
    "athena": _figure("Athena", "Greek", "Goddess of wisdom, courage, and strategic warfare.",
                      "Zeus", "Ares"),
    "apollo": _figure("Apollo", "Greek", "God of music, arts, knowledge, prophecy, and the sun.",
                      "Artemis", "Zeus", "Leto"),
    "artemis": _figure("Artemis", "Greek", "Goddess of the hunt, the wilderness, and wild animals.",
                       "Apollo", "Zeus", "Leto"),
    "aphrodite": _figure("Aphrodite", "Greek", "Goddess of love, beauty, pleasure, and procreation.",
                         "Hephaestus", "Ares", "Eros"),
    "ares": _figure("Ares", "Greek", "God of war, representing the violent and untamed aspects of battle.",
                    "Zeus", "Hera", "Aphrodite"),

    # Norse
    "odin": _figure("Odin", "Norse", "The Allfather. King of the Æsir, god of wisdom, poetry, war, and death.",
                    "Thor", "Loki", "Frigg", "Baldr"),
    "thor": _figure("Thor", "Norse", "God of thunder, lightning, and strength. Wields the hammer Mjölnir.",
                    "Odin", "Loki", "Sif"),
    "loki": _figure("Loki", "Norse", "A cunning trickster god who has the ability to change his shape and sex.",
                    "Odin", "Thor", "Hel"),
    "freya": _figure("Freya", "Norse", "Goddess associated with love, beauty, fertility, war, and death.",
                     "Odin", "Frigg"),
    "tyr": _figure("Tyr", "Norse", "A one-handed god associated with law, justice, and heroic glory in battle.",
                   "Odin", "Fenrir"),
    "hel": _figure("Hel", "Norse", "Goddess who presides over the realm of the dead, also named Hel.",
                   "Loki", "Angrboða"),

    # Egyptian
    "anubis": _figure("Anubis", "Egyptian", "God of the dead, mummification, and the afterlife. Has the head of a jackal.",
                      "Osiris", "Nephthys"),
    "ra": _figure("Ra", "Egyptian", "The ancient sun god, a primary deity in Egyptian mythology.",
                  "Horus", "Isis", "Thoth"),
    "osiris": _figure("Osiris", "Egyptian", "God of the afterlife, the underworld, and rebirth.",
                      "Isis", "Horus", "Set"),
    "isis": _figure("Isis", "Egyptian", "A major goddess, associated with magic, motherhood, and healing.",
                    "Osiris", "Horus", "Set"),
    "horus": _figure("Horus", "Egyptian", "A sky god, most often depicted as a falcon. Son of Isis and Osiris.",
                     "Isis", "Osiris", "Set", "Ra"),
    "set": _figure("Set", "Egyptian", "God of deserts, storms, disorder, and violence. Murderer of Osiris.",
                   "Osiris", "Horus", "Ra"),
    "thoth": _figure("Thoth", "Egyptian", "God of writing, magic, wisdom, and the moon. Depicted with the head of an ibis.",
                     "Ra", "Ma'at"),
    "bastet": _figure("Bastet", "Egyptian", "Goddess of the home, domesticity, cats, fertility, and childbirth.",
                      "Ra"),

    # Aztec
    "quetzalcoatl": _figure("Quetzalcoatl", "Aztec", "The 'Feathered Serpent.' God of wind, wisdom, and creation.",
                            "Tezcatlipoca", "Tlaloc", "Huitzilopochtli"),
    "tezcatlipoca": _figure("Tezcatlipoca", "Aztec", "The 'Smoking Mirror.' God of night, sorcery, and destiny.",
                            "Quetzalcoatl", "Huitzilopochtli", "Xipe Totec"),
}


CULTURE_TERMS: Dict[str, List[str]] = {
    "Greek": ["zeus", "hera", "poseidon", "athena", "apollo", "artemis", "aphrodite", "ares",
              "hermes", "dionysus", "demeter", "persephone", "hephaestus", "hestia"],
    "Norse": ["odin", "thor", "loki", "freya", "tyr", "hel"],
    "Egyptian": ["anubis", "ra", "osiris", "isis", "horus", "set", "thoth", "bastet"],
    "Aztec": ["quetzalcoatl", "tezcatlipoca"],
    "All": list(LOCAL_FIGURES),
}

DEFAULT_CULTURE = "Greek"


def find_local(name: str) -> Optional[ReferenceEntry]:
    """Case-insensitive lookup in the local tier."""
    return LOCAL_FIGURES.get(normalize_label(name))


def terms_for_culture(culture: str) -> List[str]:
    return list(CULTURE_TERMS.get(culture, CULTURE_TERMS["All"]))
