"""
Curated mythology descriptions keyed by object label.

lookup() is pure and total: it never performs I/O and always returns a
description, falling back to NO_MYTHOLOGY_DATA for unknown labels.
"""
from typing import Dict

from mythdetector.models import normalize_label

NO_MYTHOLOGY_DATA = "No mythological data available."

MYTHOLOGY_DATA: Dict[str, str] = {
    "owl": "Sacred to Athena, the owl symbolized wisdom and watchfulness in ancient Greece; "
           "Athenian coins bore its image.",
    "snake": "Serpents appear across myth: Jörmungandr encircles Midgard, Apep battles Ra each night, "
             "and the Rod of Asclepius carries a healing snake.",
    "serpent": "Quetzalcoatl, the Feathered Serpent of Aztec myth, was a god of wind, wisdom, and creation.",
    "horse": "Poseidon created the first horse, and Odin rode the eight-legged Sleipnir across the nine worlds.",
    "cat": "Bastet, the Egyptian goddess of home and fertility, was depicted as a cat; "
           "harming a cat in Egypt was a grave offence.",
    "dog": "Cerberus, the three-headed hound, guarded the gates of Hades so the dead could not escape.",
    "wolf": "Fenrir, the monstrous wolf of Norse myth, is fated to swallow Odin at Ragnarök; "
            "a she-wolf nursed Romulus and Remus.",
    "eagle": "The eagle was Zeus's messenger and bore his thunderbolts; an eagle also perched atop Yggdrasil.",
    "raven": "Huginn and Muninn, Thought and Memory, were Odin's ravens who flew across the world each day.",
    "crow": "In many traditions the crow is a trickster and messenger between the living and the dead.",
    "falcon": "Horus, the Egyptian sky god, was depicted with the head of a falcon.",
    "bull": "The Minotaur, half man and half bull, dwelt in the Labyrinth of Crete; Zeus took bull form to carry off Europa.",
    "cow": "Audhumla, the primeval cow of Norse myth, licked the first god Búri out of the ice.",
    "lion": "Heracles slew the Nemean lion, whose golden hide no weapon could pierce, and wore it as armour.",
    "goat": "Thor's chariot was drawn by the goats Tanngrisnir and Tanngnjóstr, which he could eat and resurrect.",
    "deer": "Artemis punished Actaeon by turning him into a stag, to be torn apart by his own hounds.",
    "bird": "The phoenix rises reborn from its own ashes, a symbol of renewal found from Egypt to Greece.",
    "fish": "Vishnu's first avatar, Matsya, was a fish that saved humanity from a great flood.",
    "spider": "Arachne challenged Athena to a weaving contest and was transformed into the first spider.",
    "tree": "Yggdrasil, the World Tree of Norse myth, binds together the nine worlds with its roots and branches.",
    "oak": "The oak was sacred to Zeus; at Dodona his oracle spoke through the rustling of oak leaves.",
    "apple": "Eris's golden apple, inscribed 'to the fairest', sparked the quarrel that led to the Trojan War.",
    "flower": "Narcissus, enamoured of his own reflection, wasted away and became the flower that bears his name.",
    "sun": "Ra sailed the sun across the sky each day in his solar barque; Helios drove a chariot of fire.",
    "moon": "Selene drove the moon's chariot across the night sky; Thoth was also a god of the moon.",
    "sea": "Poseidon ruled the seas from his palace beneath the waves, stirring storms with his trident.",
    "ocean": "Oceanus, the Titan, was the great river encircling the whole world in Greek cosmology.",
    "mountain": "Mount Olympus was the home of the twelve Olympian gods, ruled by Zeus.",
    "fire": "Prometheus stole fire from the gods and gave it to humanity, and was punished eternally for it.",
    "lightning": "Zeus and Thor both wield lightning, the weapon of the sky father in many traditions.",
    "hammer": "Mjölnir, Thor's hammer, could level mountains and always returned to his hand.",
    "sword": "Excalibur, the sword of King Arthur, was given to him by the Lady of the Lake.",
    "shield": "Athena's aegis bore the head of Medusa, turning enemies to stone.",
    "ship": "The Argo carried Jason and the Argonauts in their quest for the Golden Fleece.",
    "mirror": "Tezcatlipoca, the 'Smoking Mirror', saw all things through his obsidian mirror.",
    "feather": "In the Egyptian afterlife the heart was weighed against the feather of Ma'at.",
    "skull": "The Aztec god Mictlantecuhtli, lord of the dead, was depicted as a skeleton or with a skull face.",
    "statue": "Pygmalion carved a statue so beautiful he fell in love with it, and Aphrodite brought it to life.",
    "castle": "Asgard, the fortress of the Norse gods, was walled by a giant builder tricked by Loki.",
    "bridge": "Bifröst, the burning rainbow bridge, connects Midgard to Asgard.",
    "dragon": "Dragons guard treasure in countless tales, from Fafnir in Norse saga to Ladon guarding the golden apples.",
    "bear": "Callisto was turned into a bear and placed among the stars as Ursa Major.",
    "butterfly": "Psyche, whose name means soul and butterfly, won immortality and married Eros.",
    "scorpion": "Artemis (or Gaia) sent the scorpion that slew Orion; both were placed among the stars.",
}


def lookup(label: str) -> str:
    """Mythology description for a label, or NO_MYTHOLOGY_DATA."""
    return MYTHOLOGY_DATA.get(normalize_label(label or ""), NO_MYTHOLOGY_DATA)


def has_entry(label: str) -> bool:
    return normalize_label(label or "") in MYTHOLOGY_DATA
