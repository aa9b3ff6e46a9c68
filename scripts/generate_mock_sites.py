"""
Write a mock site catalog for local development and load testing.

    python scripts/generate_mock_sites.py [n_sites] [output_path]
"""

import random
import sys
from datetime import date, timedelta
from pathlib import Path

from heritage_browser.core.site import Site, SiteCategory, SiteStatus
from heritage_browser.services.site_repository import save_sites

n_sites = int(sys.argv[1]) if len(sys.argv) > 1 else 300
output = Path(sys.argv[2]) if len(sys.argv) > 2 else Path("config/data/mock_sites.json")

rng = random.Random(42)

YEAR_FORMATS = [
    lambda: f"{rng.randint(1, 19)}th century",
    lambda: f"{rng.randint(100, 3000)} BCE",
    lambda: f"{rng.randint(600, 1950)}",
    lambda: f"c. {rng.randint(600, 1950)}",
    lambda: f"AD {rng.randint(100, 1500)}",
    lambda: "Ottoman era",
    lambda: "",
]

start = date(2023, 10, 7)
span_days = (date(2024, 12, 31) - start).days

sites = []
for i in range(n_sites):
    category = rng.choice(list(SiteCategory))
    destroyed_on = None if rng.random() < 0.1 else start + timedelta(days=rng.randint(0, span_days))
    sites.append(
        Site(
            id=f"mock-{i:04d}",
            name=f"{category.label} {i}",
            category=category,
            status=rng.choice(list(SiteStatus)),
            year_built=rng.choice(YEAR_FORMATS)(),
            destroyed_on=destroyed_on,
            description=f"Mock {category.label.lower()} number {i}.",
            coordinates=(round(rng.uniform(31.22, 31.59), 4), round(rng.uniform(34.22, 34.56), 4)),
        )
    )

save_sites(sites, output)
print("wrote", output, len(sites), "sites")
