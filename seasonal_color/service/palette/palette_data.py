"""
季型色板数据
============

12 个细分季型 × 4 个色组 × 5 个参考色 (名称, HEX)。

这里只是静态配置，Lab 值由 PaletteRegistry 在启动时一次性预计算。
也可以通过 PALETTE_FILE 指向同结构的 JSON 文件替换本表。
"""

from __future__ import annotations

MICRO_SEASON_PALETTES: dict[str, dict[str, list[tuple[str, str]]]] = {
    # ── SPRING ──
    "light_spring": {
        "neutrals": [
            ("Warm Ivory", "#F6EAD7"),
            ("Light Camel", "#D8B58A"),
            ("Buttercream Beige", "#EFDDBB"),
            ("Light Warm Gray", "#C9BFB2"),
            ("Golden Sand", "#D9B77C"),
        ],
        "accents": [
            ("Peach", "#FFB38A"),
            ("Warm Rose", "#E88A8A"),
            ("Apricot", "#FF9F6B"),
            ("Light Coral", "#F4877A"),
            ("Warm Aqua", "#7FD1C4"),
        ],
        "brights": [
            ("Bright Peach", "#FF9966"),
            ("Sunny Yellow", "#FFE066"),
            ("Light Turquoise", "#5ED6C1"),
            ("Light Periwinkle", "#9FA8F5"),
            ("Poppy", "#FF6B5A"),
        ],
        "softs": [
            ("Soft Mint", "#BFE6C7"),
            ("Soft Peach", "#FFD1B3"),
            ("Light Warm Pink", "#F6B7B2"),
            ("Soft Teal", "#7FCFC3"),
            ("Buttercup", "#FFF0B3"),
        ],
    },
    "warm_spring": {
        "neutrals": [
            ("Cream", "#FFF1D6"),
            ("Camel", "#C19A6B"),
            ("Honey Beige", "#D9B98A"),
            ("Golden Brown", "#A8743A"),
            ("Warm Taupe", "#A89074"),
        ],
        "accents": [
            ("Coral", "#FF6F61"),
            ("Melon", "#FF8C69"),
            ("Warm Turquoise", "#30C5B8"),
            ("Salmon", "#F88379"),
            ("Golden Olive", "#A89A3C"),
        ],
        "brights": [
            ("Cantaloupe", "#FFA64D"),
            ("Marigold Yellow", "#FFC83D"),
            ("Bright Aqua", "#2ECED0"),
            ("Tomato Red", "#F0502F"),
            ("Kelly Green", "#4CBB17"),
        ],
        "softs": [
            ("Soft Apricot", "#F7C59F"),
            ("Light Moss", "#B9C48A"),
            ("Warm Sand", "#E6CFA8"),
            ("Soft Coral", "#F2A48F"),
            ("Soft Aqua", "#9ED9CF"),
        ],
    },
    "bright_spring": {
        "neutrals": [
            ("Clear Ivory", "#FFF5E1"),
            ("Golden Tan", "#C8A165"),
            ("Warm Navy", "#2B3A67"),
            ("Medium Warm Gray", "#8C8279"),
            ("Milk Chocolate", "#6B4423"),
        ],
        "accents": [
            ("Hot Coral", "#FF5A4E"),
            ("Bright Periwinkle", "#6F7FEA"),
            ("Clear Salmon", "#FF8066"),
            ("Warm Pink", "#FF6F91"),
            ("Golden Yellow", "#FFCB2F"),
        ],
        "brights": [
            ("Clear Turquoise", "#00C5B5"),
            ("Poppy Red", "#EE3B2B"),
            ("Bright Orange", "#FF7A1A"),
            ("Bright Violet", "#9B5DE5"),
            ("Clear Green", "#17A34A"),
        ],
        "softs": [
            ("Light Aqua", "#A8E6DF"),
            ("Peach Sorbet", "#FFC4A3"),
            ("Light Lemon", "#FFF3A0"),
            ("Soft Periwinkle", "#B3B9F2"),
            ("Rose Petal", "#F7A8B8"),
        ],
    },
    # ── SUMMER ──
    "soft_summer": {
        "neutrals": [
            ("Mushroom", "#A39A92"),
            ("Soft Charcoal", "#5A5A60"),
            ("Rose Brown", "#8E7474"),
            ("Greige", "#B5ADA3"),
            ("Grayed Navy", "#4A5568"),
        ],
        "accents": [
            ("Dusty Rose", "#D8A7A7"),
            ("Mauve", "#C8A2C8"),
            ("Soft Berry", "#B58CA5"),
            ("Sage Blue", "#8FA5A8"),
            ("Dusty Teal", "#6E9A9A"),
        ],
        "brights": [
            ("Raspberry Mauve", "#B05A7A"),
            ("Muted Teal", "#3F8A8C"),
            ("Smoky Blue", "#5B7FA3"),
            ("Soft Plum", "#8B5A83"),
            ("Rosewood", "#A8636E"),
        ],
        "softs": [
            ("Heather Gray", "#B3ACB5"),
            ("Misty Green", "#A9BDB1"),
            ("Soft Mauve", "#C9B1BF"),
            ("Pebble", "#BEB8B1"),
            ("Muted Lavender", "#A8A1C6"),
        ],
    },
    "cool_summer": {
        "neutrals": [
            ("Cool Gray", "#9EA3AD"),
            ("Slate Blue Gray", "#6F7D8C"),
            ("Soft Navy", "#3C4F6B"),
            ("Cool Taupe", "#948A8F"),
            ("Pewter", "#B4B7BC"),
        ],
        "accents": [
            ("Rose Pink", "#D9739B"),
            ("Cornflower", "#6A8FD6"),
            ("Cool Teal", "#4A9AA5"),
            ("Plum Rose", "#A5577E"),
            ("Blue Lavender", "#9A9AD8"),
        ],
        "brights": [
            ("Soft Fuchsia", "#D66DA3"),
            ("Cool Blue", "#4F7CC9"),
            ("Sea Blue", "#2F8FB0"),
            ("Berry Red", "#C0395A"),
            ("Jade", "#3AA58E"),
        ],
        "softs": [
            ("Blue Gray", "#B7C4CF"),
            ("Dove Gray", "#B9B4BA"),
            ("Powder Blue", "#AFC8E7"),
            ("Mauve Mist", "#C3A7B8"),
            ("Smoky Lilac", "#A99BB8"),
        ],
    },
    "light_summer": {
        "neutrals": [
            ("Soft White", "#EFEBE6"),
            ("Light Gray", "#C8C8D0"),
            ("Rose Beige", "#E3D5D2"),
            ("Light Taupe", "#CDC4C1"),
            ("Silver Frost", "#DDE1E8"),
        ],
        "accents": [
            ("Powder Pink", "#F4C5C9"),
            ("Lavender", "#C7B8E0"),
            ("Pale Periwinkle", "#AFC0F0"),
            ("Aqua Mist", "#A7DCD9"),
            ("Light Orchid", "#D9A6D6"),
        ],
        "brights": [
            ("Periwinkle", "#8FA4E8"),
            ("Cool Aqua", "#8FD6D5"),
            ("Strawberry Ice", "#E87BAA"),
            ("Sky Blue", "#7EB6E8"),
            ("Watermelon", "#F07A8E"),
        ],
        "softs": [
            ("Misty Blue", "#C6D7E2"),
            ("Heather", "#D8CBE2"),
            ("Soft Lilac", "#E7D6F5"),
            ("Cloud Pink", "#F7DDE3"),
            ("Seafoam", "#BFE3D9"),
        ],
    },
    # ── AUTUMN ──
    "deep_autumn": {
        "neutrals": [
            ("Chocolate Brown", "#5C3A21"),
            ("Espresso", "#3B2A20"),
            ("Deep Olive", "#556B2F"),
            ("Dark Khaki", "#6E6440"),
            ("Warm Charcoal", "#3F3A36"),
        ],
        "accents": [
            ("Russet", "#9C3D18"),
            ("Burnt Orange", "#B1470E"),
            ("Deep Caramel", "#996515"),
            ("Forest Green", "#3A5A40"),
            ("Deep Teal", "#1F5F5B"),
        ],
        "brights": [
            ("Paprika", "#B5402A"),
            ("Golden Ochre", "#C98A1B"),
            ("Deep Jade", "#0F766E"),
            ("Pumpkin Spice", "#C8611E"),
            ("Emerald Olive", "#3E7C3A"),
        ],
        "softs": [
            ("Brick Rose", "#A0615A"),
            ("Olive Drab", "#6B6B3A"),
            ("Cinnamon", "#A26B47"),
            ("Aubergine Brown", "#5E3A3A"),
            ("Bronze", "#8C6A3F"),
        ],
    },
    "soft_autumn": {
        "neutrals": [
            ("Warm Beige", "#E6D5B8"),
            ("Soft Camel", "#C9A27E"),
            ("Olive Taupe", "#B6A892"),
            ("Mushroom Brown", "#8C7B6B"),
            ("Khaki", "#B8A886"),
        ],
        "accents": [
            ("Dusty Terracotta", "#A77E6B"),
            ("Salmon Clay", "#C9876E"),
            ("Muted Mustard", "#C9A550"),
            ("Soft Teal", "#6E9C94"),
            ("Dusty Plum", "#7A6A8E"),
        ],
        "brights": [
            ("Muted Coral", "#D98870"),
            ("Sage Green", "#8E9A6C"),
            ("Soft Moss", "#6E8B74"),
            ("Warm Jade", "#4E8F7E"),
            ("Burnished Gold", "#B59F3B"),
        ],
        "softs": [
            ("Sage", "#C4C8A8"),
            ("Dusty Olive", "#A3A380"),
            ("Clay", "#C9A28C"),
            ("Soft Terracotta", "#D1A38A"),
            ("Muted Gold", "#D6BA6A"),
        ],
    },
    "warm_autumn": {
        "neutrals": [
            ("Camel", "#C1A16B"),
            ("Caramel", "#B78B57"),
            ("Olive Brown", "#7A6A3A"),
            ("Coffee", "#6F4E37"),
            ("Cream Khaki", "#D9C9A0"),
        ],
        "accents": [
            ("Terracotta", "#C96541"),
            ("Rust", "#B4441C"),
            ("Burnt Sienna", "#A85F3D"),
            ("Mustard", "#D3A63C"),
            ("Warm Olive", "#8E8C53"),
        ],
        "brights": [
            ("Pumpkin", "#F18F01"),
            ("Marigold", "#FFC145"),
            ("Moss Green", "#8FAE3E"),
            ("Teal", "#1B998B"),
            ("Brick Red", "#A23E3D"),
        ],
        "softs": [
            ("Golden Sand", "#D9BE93"),
            ("Soft Olive", "#A89F80"),
            ("Peach Clay", "#D4A07E"),
            ("Honey", "#D9A954"),
            ("Faded Rust", "#B9826A"),
        ],
    },
    # ── WINTER ──
    "bright_winter": {
        "neutrals": [
            ("Icy White", "#F4F8FF"),
            ("Jet Black", "#111111"),
            ("Cool Charcoal", "#36393F"),
            ("True Navy", "#14213D"),
            ("Steel Gray", "#7D8590"),
        ],
        "accents": [
            ("Hot Pink", "#FF3E9A"),
            ("Electric Blue", "#1F6FFF"),
            ("Vivid Violet", "#7A28CB"),
            ("Cherry Red", "#E0103A"),
            ("Bright Teal", "#00A6A6"),
        ],
        "brights": [
            ("Shocking Pink", "#FF1493"),
            ("Cobalt", "#0047AB"),
            ("Vivid Emerald", "#00A86B"),
            ("Scarlet", "#FF2400"),
            ("Citrine", "#E4D00A"),
        ],
        "softs": [
            ("Icy Pink", "#F9D7E8"),
            ("Icy Aqua", "#CFF3F1"),
            ("Icy Lemon", "#F8F7C8"),
            ("Icy Violet", "#DCD3F8"),
            ("Icy Mint", "#D2F5E3"),
        ],
    },
    "cool_winter": {
        "neutrals": [
            ("True White", "#FFFFFF"),
            ("Cool Black", "#0A0A0A"),
            ("Silver Gray", "#BFC3C9"),
            ("Blue-Gray", "#8A97A8"),
            ("Navy", "#1F2A44"),
        ],
        "accents": [
            ("Fuchsia", "#E3007E"),
            ("Berry", "#B8004E"),
            ("Royal Purple", "#5A2D82"),
            ("Crimson", "#D1002C"),
            ("Cool Blue", "#2E5AAC"),
        ],
        "brights": [
            ("True Red", "#FF0000"),
            ("Royal Blue", "#4169E1"),
            ("Emerald", "#009975"),
            ("Icy Teal", "#4BC6B9"),
            ("Lemon Ice", "#F2FF6E"),
        ],
        "softs": [
            ("Icy Lavender", "#D6D4F7"),
            ("Ice Pink", "#F6D3E6"),
            ("Frost Blue", "#D8EAFE"),
            ("Soft Wine", "#C79CA6"),
            ("Cool Plum", "#836283"),
        ],
    },
    "deep_winter": {
        "neutrals": [
            ("True Black", "#000000"),
            ("Charcoal", "#333333"),
            ("Midnight Navy", "#191970"),
            ("Cool Graphite", "#3A3F47"),
            ("Black Cherry", "#2E0F1F"),
        ],
        "accents": [
            ("Burgundy", "#800020"),
            ("Deep Emerald", "#006A4E"),
            ("Indigo", "#4B0082"),
            ("Pine", "#01796F"),
            ("Deep Plum", "#5A1F4F"),
        ],
        "brights": [
            ("Blue Red", "#C8102E"),
            ("Deep Fuchsia", "#B0106A"),
            ("Sapphire", "#0F52BA"),
            ("Jewel Green", "#00875A"),
            ("Deep Turquoise", "#007C80"),
        ],
        "softs": [
            ("Dark Rose", "#8E4A63"),
            ("Cool Taupe Gray", "#6B6570"),
            ("Slate Teal", "#3E6169"),
            ("Smoky Plum", "#5D4A66"),
            ("Storm Blue", "#4A5A78"),
        ],
    },
}
