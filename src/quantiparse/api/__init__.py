"""HTTP surface for the quantity parser."""
