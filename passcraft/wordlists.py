"""
passcraft.wordlists
Static token lists for passphrase generation.

Syllables are two or three letters, whole words four letters or more, so the
two lists never share a token.
"""

SYLLABLE_TOKENS = (
    "ba", "ban", "bar", "bas", "bal", "be", "ben", "ber", "bes", "bel", "bi",
    "bin", "bir", "bis", "bil", "bo", "bon", "bor", "bos", "bol", "bu", "bun",
    "bur", "bus", "bul", "ca", "can", "car", "cas", "cal", "ce", "cen", "cer",
    "ces", "cel", "ci", "cin", "cir", "cis", "cil", "co", "con", "cor", "cos",
    "col", "cu", "cun", "cur", "cus", "cul", "da", "dan", "dar", "das", "dal",
    "de", "den", "der", "des", "del", "di", "din", "dir", "dis", "dil", "do",
    "don", "dor", "dos", "dol", "du", "dun", "dur", "dus", "dul", "fa", "fan",
    "far", "fas", "fal", "fe", "fen", "fer", "fes", "fel", "fi", "fin", "fir",
    "fis", "fil", "fo", "fon", "for", "fos", "fol", "fu", "fun", "fur", "fus",
    "ful", "ga", "gan", "gar", "gas", "gal", "ge", "gen", "ger", "ges", "gel",
    "gi", "gin", "gir", "gis", "gil", "go", "gon", "gor", "gos", "gol", "gu",
    "gun", "gur", "gus", "gul", "ha", "han", "har", "has", "hal", "he", "hen",
    "her", "hes", "hel", "hi", "hin", "hir", "his", "hil", "ho", "hon", "hor",
    "hos", "hol", "hu", "hun", "hur", "hus", "hul", "ja", "jan", "jar", "jas",
    "jal", "je", "jen", "jer", "jes", "jel", "ji", "jin", "jir", "jis", "jil",
    "jo", "jon", "jor", "jos", "jol", "ju", "jun", "jur", "jus", "jul", "ka",
    "kan", "kar", "kas", "kal", "ke", "ken", "ker", "kes", "kel", "ki", "kin",
    "kir", "kis", "kil", "ko", "kon", "kor", "kos", "kol", "ku", "kun", "kur",
    "kus", "kul", "la", "lan", "lar", "las", "lal", "le", "len", "ler", "les",
    "lel", "li", "lin", "lir", "lis", "lil", "lo", "lon", "lor", "los", "lol",
    "lu", "lun", "lur", "lus", "lul", "ma", "man", "mar", "mas", "mal", "me",
    "men", "mer", "mes", "mel", "mi", "min", "mir", "mis", "mil", "mo", "mon",
    "mor", "mos", "mol", "mu", "mun", "mur", "mus", "mul", "na", "nan", "nar",
    "nas", "nal", "ne", "nen", "ner", "nes", "nel", "ni", "nin", "nir", "nis",
    "nil", "no", "non", "nor", "nos", "nol", "nu", "nun", "nur", "nus", "nul",
    "pa", "pan", "par", "pas", "pal", "pe", "pen", "per", "pes", "pel", "pi",
    "pin", "pir", "pis", "pil", "po", "pon", "por", "pos", "pol", "pu", "pun",
    "pur", "pus", "pul", "ra", "ran", "rar", "ras", "ral", "re", "ren", "rer",
    "res", "rel", "ri", "rin", "rir", "ris", "ril", "ro", "ron", "ror", "ros",
    "rol", "ru", "run", "rur", "rus", "rul", "sa", "san", "sar", "sas", "sal",
    "se", "sen", "ser", "ses", "sel", "si", "sin", "sir", "sis", "sil", "so",
    "son", "sor", "sos", "sol", "su", "sun", "sur", "sus", "sul", "ta", "tan",
    "tar", "tas", "tal", "te", "ten", "ter", "tes", "tel", "ti", "tin", "tir",
    "tis", "til", "to", "ton", "tor", "tos", "tol", "tu", "tun", "tur", "tus",
    "tul", "va", "van", "var", "vas", "val", "ve", "ven", "ver", "ves", "vel",
    "vi", "vin", "vir", "vis", "vil", "vo", "von", "vor", "vos", "vol", "vu",
    "vun", "vur", "vus", "vul", "wa", "wan", "war", "was", "wal", "we", "wen",
    "wer", "wes", "wel", "wi", "win", "wir", "wis", "wil", "wo", "won", "wor",
    "wos", "wol", "wu", "wun", "wur", "wus", "wul", "za", "zan", "zar", "zas",
    "zal", "ze", "zen", "zer", "zes", "zel", "zi", "zin", "zir", "zis", "zil",
    "zo", "zon", "zor", "zos", "zol", "zu", "zun", "zur", "zus", "zul",
)

WORD_TOKENS = (
    "able", "acid", "aged", "also", "amber", "angle", "ankle", "apple",
    "april", "apron", "arch", "arena", "armor", "arrow", "ashen", "atlas",
    "atom", "attic", "audio", "aunt", "autumn", "avenue", "awake", "axis",
    "baby", "bacon", "badge", "bagel", "baker", "bald", "ballad", "bamboo",
    "banana", "band", "bank", "barn", "baron", "basil", "basin", "basket",
    "batch", "bath", "beach", "beacon", "bead", "beam", "bean", "bear",
    "beard", "beast", "bell", "belt", "bench", "berry", "bird", "birch",
    "bison", "blade", "blank", "blast", "blaze", "blend", "bless", "blimp",
    "blink", "bliss", "block", "bloom", "blossom", "blue", "blunt", "board",
    "boat", "body", "bold", "bolt", "bone", "bonus", "book", "boost", "boot",
    "border", "bottle", "bound", "bowl", "brain", "brake", "branch", "brass",
    "brave", "bread", "breeze", "brick", "bride", "brief", "bright", "brisk",
    "broad", "bronze", "brook", "broom", "brush", "bubble", "bucket", "buddy",
    "budget", "buffalo", "bugle", "build", "bulb", "bundle", "bunny", "burst",
    "bush", "butter", "button", "cabin", "cable", "cactus", "cake", "calm",
    "camel", "camera", "camp", "canal", "candle", "candy", "cannon", "canoe",
    "canvas", "canyon", "cape", "captain", "card", "cargo", "carpet", "carrot",
    "carton", "castle", "cattle", "cave", "cedar", "cell", "cellar", "cement",
    "chain", "chair", "chalk", "charm", "chart", "chase", "cheek", "cheese",
    "cherry", "chess", "chest", "chief", "child", "chimney", "chin", "chip",
    "choice", "chorus", "cider", "cinema", "circle", "citrus", "civic",
    "claim", "clam", "clay", "clever", "cliff", "climb", "clock", "cloth",
    "cloud", "clover", "club", "coach", "coast", "cobalt", "cocoa", "coconut",
    "coffee", "coin", "cold", "comet", "comic", "copper", "coral", "cord",
    "cork", "corn", "corner", "cosmic", "cotton", "couch", "cougar", "court",
    "cousin", "cove", "crab", "craft", "crane", "crater", "crayon", "cream",
    "creek", "crisp", "crow", "crown", "crumb", "crust", "crystal", "cube",
    "cupboard", "curtain", "cushion", "cycle", "daisy", "dance", "dawn",
    "deck", "deer", "delta", "denim", "desert", "desk", "dial", "diary",
    "diesel", "dime", "dinner", "diver", "dock", "dolphin", "dome", "donkey",
    "door", "dove", "dragon", "drama", "drawer", "dream", "dress", "drift",
    "drill", "drum", "duck", "dune", "dust", "eagle", "earth", "easel", "echo",
    "eclipse", "edge", "elbow", "elder", "ember", "empty", "engine", "envoy",
    "epic", "equal", "error", "exit", "fable", "fabric", "falcon", "fancy",
    "farm", "feast", "feather", "fence", "fern", "ferry", "fiber", "field",
    "fiesta", "final", "finch", "fire", "fjord", "flag", "flame", "flask",
    "fleet", "flint", "float", "flock", "flora", "flour", "flute", "foam",
    "focus", "forest", "forge", "fork", "fossil", "fountain", "frame", "fresh",
    "frog", "frost", "fruit", "fudge", "funnel", "gadget", "galaxy", "garden",
    "garlic", "gate", "gecko", "gentle", "giant", "ginger", "glacier", "glad",
    "glass", "globe", "glove", "glow", "goat", "gold", "golf", "goose",
    "gospel", "grain", "grape", "graph", "grass", "gravel", "gravy", "green",
    "grid", "grill", "groove", "guard", "guest", "guide", "guitar", "gull",
    "habit", "hammer", "hamster", "handle", "harbor", "harp", "harvest",
    "hatch", "hawk", "hazel", "heart", "hedge", "helmet", "herb", "hero",
    "heron", "hill", "hinge", "hobby", "honey", "hood", "hook", "horizon",
    "horn", "horse", "hotel", "hound", "house", "humble", "hunter", "husky",
    "icon", "igloo", "indigo", "inlet", "input", "iris", "iron", "island",
    "ivory", "jacket", "jaguar", "jamboree", "jelly", "jersey", "jewel",
    "jigsaw", "jockey", "joke", "journal", "jumbo", "jungle", "juniper",
    "kayak", "kernel", "kettle", "kiosk", "kitten", "kiwi", "knee", "knight",
    "knot", "koala", "label", "ladder", "lake", "lamb", "lamp", "lantern",
    "laptop", "larch", "latch", "lava", "lawn", "layer", "leaf", "ledge",
    "lemon", "lens", "lever", "lilac", "lily", "limit", "linen", "lion",
    "liquid", "lizard", "llama", "lobster", "locket", "lodge", "lotus",
    "lumber", "lunar", "lunch", "magnet", "mango", "maple", "marble", "market",
    "marsh", "mask", "meadow", "medal", "melon", "menu", "metal", "meteor",
    "midnight", "mill", "mineral", "mint", "mirror", "mist", "mitten", "model",
    "monk", "moon", "moose", "mosaic", "moss", "motel", "motor", "mountain",
    "mouse", "muffin", "mural", "museum", "music", "mustard", "myth", "napkin",
    "navy", "nebula", "needle", "nest", "nickel", "noble", "noodle", "north",
    "novel", "nugget", "nutmeg", "oasis", "ocean", "olive", "omega", "onion",
    "onyx", "opal", "orange", "orbit", "orchid", "otter", "oven", "oxygen",
    "oyster", "paddle", "page", "palace", "palm", "panda", "panel", "panther",
    "paper", "parade", "parcel", "parrot", "pasta", "patrol", "peach",
    "peanut", "pearl", "pebble", "pecan", "pedal", "pelican", "pencil",
    "pepper", "piano", "pickle", "pigeon", "pillow", "pilot", "pine",
    "pioneer", "pirate", "pistol", "pixel", "pizza", "planet", "plaza", "plum",
    "pocket", "poem", "polar", "pond", "pony", "poppy", "porch", "portal",
    "potato", "powder", "prairie", "prism", "puddle", "pulse", "pumpkin",
    "puppet", "puzzle", "pyramid", "quail", "quartz", "queen", "quest",
    "quick", "quiet", "quill", "quilt", "rabbit", "radar", "radio", "raft",
    "rain", "raisin", "ranch", "raven", "razor", "recipe", "reef", "relic",
    "ribbon", "rice", "ridge", "river", "road", "robin", "robot", "rocket",
    "rodeo", "roof", "rose", "rover", "ruby", "rudder", "rugby", "ruler",
    "runway", "rustic", "saddle", "safari", "saga", "sail", "salad", "salmon",
    "salt", "sand", "satin", "saucer", "scale", "scarf", "school", "scout",
    "screen", "scroll", "seal", "season", "seed", "shadow", "shark", "sheep",
    "shelf", "shell", "sheriff", "shield", "ship", "shore", "shovel", "shrimp",
    "signal", "silk", "silver", "siren", "sketch", "skiff", "skull", "slate",
    "sled", "slope", "smoke", "snail", "snake", "snow", "soap", "socket",
    "sofa", "solar", "sonic", "soup", "spark", "sparrow", "spice", "spider",
    "spinach", "spoon", "spring", "sprout", "spruce", "square", "squid",
    "stable", "stadium", "stamp", "star", "statue", "steam", "steel", "stem",
    "stone", "stool", "storm", "stove", "straw", "stream", "street", "studio",
    "sugar", "summit", "sunset", "swamp", "swan", "sweater", "swift", "sword",
    "syrup", "table", "tablet", "tack", "tadpole", "tail", "talent", "tango",
    "tank", "tape", "target", "teapot", "teal", "temple", "tennis", "tent",
    "thistle", "thorn", "thread", "throne", "thunder", "ticket", "tiger",
    "timber", "toast", "token", "tomato", "tonic", "topaz", "torch", "tornado",
    "tower", "tractor", "trail", "train", "tram", "tree", "tribe", "trophy",
    "trout", "truck", "trumpet", "tulip", "tuna", "tundra", "tunnel", "turkey",
    "turtle", "tuxedo", "twig", "umbrella", "uncle", "unicorn", "union",
    "unit", "upper", "urban", "urchin", "utopia", "valley", "valve", "vapor",
    "vase", "velvet", "vendor", "venus", "verse", "vessel", "vest", "villa",
    "vine", "violet", "violin", "visor", "vista", "vivid", "voice", "volcano",
    "vortex", "voyage", "waffle", "wagon", "walnut", "walrus", "wand",
    "warden", "water", "wave", "wheat", "wheel", "whistle", "willow", "window",
    "winter", "wizard", "wolf", "wombat", "wood", "wool", "world", "wren",
    "yacht", "yard", "yarn", "yeast", "yellow", "yodel", "yogurt", "zebra",
    "zenith", "zephyr", "zero", "zigzag", "zinc", "zipper", "zone",
)
