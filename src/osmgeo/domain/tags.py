"""Static tag tables consulted by entity derived properties."""

# Keys whose presence makes a closed way an area, mapped to the values that
# do not (linear features that are commonly drawn closed).
AREA_KEYS: dict[str, frozenset[str]] = {
    "aeroway": frozenset({"gate", "runway", "taxiway", "windsock"}),
    "amenity": frozenset({"bench"}),
    "area:highway": frozenset(),
    "building": frozenset(),
    "building:part": frozenset(),
    "craft": frozenset(),
    "golf": frozenset({"hole"}),
    "historic": frozenset(),
    "landuse": frozenset(),
    "leisure": frozenset({"picnic_table", "slipway", "track"}),
    "man_made": frozenset({"breakwater", "cutline", "embankment", "groyne", "pipeline"}),
    "military": frozenset(),
    "natural": frozenset({"cliff", "coastline", "ridge", "tree_row"}),
    "office": frozenset(),
    "place": frozenset(),
    "power": frozenset({"cable", "line", "minor_line"}),
    "public_transport": frozenset(),
    "shop": frozenset(),
    "sport": frozenset(),
    "tourism": frozenset(),
    "waterway": frozenset({"canal", "ditch", "drain", "river", "stream"}),
}

# Tag values that imply a oneway way even without an explicit oneway tag.
ONE_WAY_TAGS: dict[str, frozenset[str]] = {
    "aerialway": frozenset(
        {
            "chair_lift",
            "mixed_lift",
            "t-bar",
            "j-bar",
            "platter",
            "rope_tow",
            "magic_carpet",
            "yes",
        }
    ),
    "highway": frozenset({"motorway", "motorway_link"}),
    "junction": frozenset({"roundabout"}),
    "man_made": frozenset({"piste:halfpipe"}),
    "piste:type": frozenset({"downhill", "sled", "yes"}),
    "waterway": frozenset({"river", "stream"}),
}

# Deprecated tags and their replacements. "*" matches any old value.
DEPRECATED_TAGS: list[dict[str, dict[str, str]]] = [
    {"old": {"amenity": "firepit"}, "replace": {"leisure": "firepit"}},
    {"old": {"barrier": "wire_fence"}, "replace": {"barrier": "fence", "fence_type": "chain"}},
    {"old": {"barrier": "wood_fence"}, "replace": {"barrier": "fence", "fence_type": "wood"}},
    {"old": {"highway": "ford"}, "replace": {"ford": "yes"}},
    {"old": {"highway": "stile"}, "replace": {"barrier": "stile"}},
    {"old": {"highway": "incline"}, "replace": {"highway": "road", "incline": "up"}},
    {"old": {"highway": "incline_steep"}, "replace": {"highway": "road", "incline": "up"}},
    {"old": {"highway": "unsurfaced"}, "replace": {"highway": "road", "incline": "unpaved"}},
    {"old": {"landuse": "wood"}, "replace": {"landuse": "forest", "natural": "wood"}},
    {"old": {"natural": "marsh"}, "replace": {"natural": "wetland", "wetland": "marsh"}},
    {"old": {"power_source": "*"}, "replace": {"generator:source": "$1"}},
    {"old": {"power_rating": "*"}, "replace": {"generator:output": "$1"}},
    {"old": {"shop": "organic"}, "replace": {"shop": "supermarket", "organic": "only"}},
]

# Bookkeeping keys that do not make an entity interesting on their own.
UNINTERESTING_KEYS: frozenset[str] = frozenset({"attribution", "created_by", "source", "odbl"})
UNINTERESTING_PREFIXES: tuple[str, ...] = ("tiger:",)
