"""
Template bank data for every theme in the catalog.

Each bank lists candidates per slot. Verb phrases in "events" are past tense
and read naturally after "they" or "who".
"""

from .types import TemplateBank


FOREST_BANK = TemplateBank(
    characters=("wise owl", "playful squirrel", "mysterious deer", "ancient tree spirit", "friendly rabbit", "magical butterfly"),
    locations=("ancient oak grove", "crystal-clear stream", "hidden waterfall", "moonlit meadow", "whispering willow", "enchanted glade"),
    events=("discovered a magical portal", "helped a lost animal", "solved a forest mystery", "learned ancient wisdom", "made new friends", "protected the forest"),
    objects=("glowing crystal", "magical acorn", "enchanted flower", "wise old book", "mystical stone", "golden leaf"),
    emotions=("wonder", "joy", "courage", "friendship", "wisdom", "peace"),
    lessons=("the importance of protecting nature", "the power of friendship", "the value of courage", "the beauty of kindness", "the magic of believing", "the strength of unity"),
)

SPACE_BANK = TemplateBank(
    characters=("friendly alien", "robot companion", "space captain", "cosmic guide", "star navigator", "galaxy guardian"),
    locations=("distant planet", "space station", "nebula cloud", "asteroid field", "moon base", "cosmic garden"),
    events=("discovered a new world", "solved a space mystery", "helped alien friends", "explored a nebula", "saved a planet", "learned cosmic secrets"),
    objects=("crystal communicator", "star map", "cosmic compass", "energy crystal", "space suit", "galaxy key"),
    emotions=("excitement", "wonder", "bravery", "curiosity", "friendship", "discovery"),
    lessons=("the vastness of the universe", "the importance of exploration", "the power of friendship across galaxies", "the value of curiosity", "the beauty of discovery", "the unity of all beings"),
)

UNDERWATER_BANK = TemplateBank(
    characters=("wise dolphin", "playful octopus", "mysterious mermaid", "ancient sea turtle", "friendly whale", "magical seahorse"),
    locations=("coral reef", "underwater cave", "sunken ship", "kelp forest", "deep trench", "tropical lagoon"),
    events=("discovered a hidden treasure", "helped sea creatures", "solved an ocean mystery", "learned underwater secrets", "made aquatic friends", "protected marine life"),
    objects=("pearl necklace", "coral crown", "sea shell", "treasure chest", "magical trident", "ocean crystal"),
    emotions=("amazement", "joy", "courage", "friendship", "wonder", "peace"),
    lessons=("the importance of ocean conservation", "the beauty of marine life", "the power of underwater friendship", "the value of protecting nature", "the magic of the deep sea", "the harmony of ocean creatures"),
)

MEDIEVAL_BANK = TemplateBank(
    characters=("brave knight", "wise wizard", "noble princess", "friendly dragon", "loyal squire", "mysterious hermit"),
    locations=("ancient castle", "enchanted forest", "mystical tower", "royal court", "dragon's cave", "magical kingdom"),
    events=("saved the kingdom", "discovered ancient magic", "made noble friends", "solved a royal mystery", "helped a dragon", "learned chivalry"),
    objects=("magical sword", "royal crown", "ancient scroll", "dragon scale", "knight's shield", "wizard's staff"),
    emotions=("honor", "courage", "nobility", "friendship", "wisdom", "chivalry"),
    lessons=("the importance of honor", "the power of courage", "the value of friendship", "the beauty of chivalry", "the strength of unity", "the wisdom of the ages"),
)

CYBERPUNK_BANK = TemplateBank(
    characters=("cyber hacker", "robot companion", "neon warrior", "digital guide", "tech wizard", "cyber guardian"),
    locations=("neon city", "cyber cafe", "virtual world", "tech lab", "digital realm", "holographic space"),
    events=("hacked the system", "solved a cyber mystery", "helped digital friends", "explored virtual worlds", "saved the network", "learned tech secrets"),
    objects=("neural interface", "holographic device", "cyber implant", "digital key", "energy core", "tech gadget"),
    emotions=("excitement", "curiosity", "innovation", "friendship", "discovery", "progress"),
    lessons=("the power of technology", "the importance of innovation", "the value of digital friendship", "the beauty of progress", "the magic of virtual worlds", "the unity of human and machine"),
)

FAIRY_TALE_BANK = TemplateBank(
    characters=("kind fairy", "magical unicorn", "wise owl", "enchanted prince", "mystical creature", "fairy godmother"),
    locations=("enchanted garden", "fairy kingdom", "magical forest", "crystal palace", "rainbow bridge", "starlit meadow"),
    events=("received a magical blessing", "discovered fairy magic", "helped magical creatures", "solved an enchantment", "made fairy friends", "learned ancient spells"),
    objects=("fairy wand", "magical crystal", "enchanted flower", "golden key", "mystical amulet", "fairy dust"),
    emotions=("wonder", "joy", "magic", "friendship", "enchantment", "happiness"),
    lessons=("the power of magic", "the importance of kindness", "the value of fairy friendship", "the beauty of enchantment", "the magic of believing", "the joy of wonder"),
)

STEAMPUNK_BANK = TemplateBank(
    characters=("steam engineer", "clockwork companion", "brass inventor", "gear master", "steam pilot", "mechanical genius"),
    locations=("steam workshop", "clockwork city", "brass laboratory", "gear factory", "steam airship", "mechanical garden"),
    events=("invented a machine", "solved a mechanical puzzle", "helped steam friends", "explored clockwork worlds", "saved the city", "learned engineering secrets"),
    objects=("brass gear", "steam engine", "clockwork device", "mechanical tool", "steam whistle", "gear mechanism"),
    emotions=("innovation", "precision", "creativity", "friendship", "invention", "progress"),
    lessons=("the power of invention", "the importance of precision", "the value of mechanical friendship", "the beauty of engineering", "the magic of steam power", "the unity of people and machines"),
)

SUPERHERO_BANK = TemplateBank(
    characters=("superhero mentor", "sidekick companion", "heroic ally", "wise mentor", "brave friend", "superhero team"),
    locations=("hero headquarters", "city skyline", "secret base", "heroic training ground", "superhero academy", "metropolitan city"),
    events=("saved the city", "discovered superpowers", "helped citizens", "solved a hero mystery", "made heroic friends", "learned hero wisdom"),
    objects=("superhero cape", "power ring", "heroic mask", "super gadget", "energy crystal", "heroic emblem"),
    emotions=("heroism", "courage", "justice", "friendship", "bravery", "inspiration"),
    lessons=("the power of heroism", "the importance of justice", "the value of heroic friendship", "the beauty of courage", "the magic of superpowers", "the strength of unity"),
)
