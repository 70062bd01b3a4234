"""
textsim — Quick-start examples with dummy data.

Run:  uv run python examples/quickstart.py
"""

from __future__ import annotations


def divider(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


# ──────────────────────────────────────────────────────────────
# 1. Edit distance  (textsim.distance.OSA)
# ──────────────────────────────────────────────────────────────

def example_distance() -> None:
    divider("1 · Edit Distance (textsim.distance.OSA)")

    from textsim.distance import OSA

    pairs = [
        ("kitten", "sitting"),
        ("ab", "ba"),
        ("Microsoft", "Micorsoft"),
        ("ca", "abc"),
        ("", "empty"),
    ]

    for s1, s2 in pairs:
        d = OSA.distance(s1, s2)
        nd = OSA.normalized_distance(s1, s2)
        print(f'  distance("{s1}", "{s2}")'.ljust(40) + f"= {d}   score = {nd:.4g}")


# ──────────────────────────────────────────────────────────────
# 2. All-pairs comparison  (process.pairwise)
# ──────────────────────────────────────────────────────────────

def example_pairwise() -> None:
    divider("2 · All-pairs Comparison (process.pairwise)")

    from textsim import process, records_from

    names = records_from(["John Smith", "Jon Smith", "Jane Smyth", "John Smiht"])
    for result in process.pairwise(names):
        print(f"  {result.format()}")


# ──────────────────────────────────────────────────────────────
# 3. Reference comparison  (process.reference)
# ──────────────────────────────────────────────────────────────

def example_reference() -> None:
    divider("3 · Reference Comparison (process.reference)")

    from textsim import process, records_from
    from textsim.result import BLOCK_MARKER

    dictionary = records_from(["receive", "believe", "achieve", "deceive", "relieve"])
    typos = records_from(["recieve", "beleive", "acheive"])

    for block in process.reference(dictionary, typos):
        for result in block.results:
            print(f"  {result.format()}")
        print(f"  {BLOCK_MARKER}")


# ──────────────────────────────────────────────────────────────
# 4. Extraction and distance matrix  (process.extract / cdist)
# ──────────────────────────────────────────────────────────────

def example_extract() -> None:
    divider("4 · Extraction (process.extract / process.cdist)")

    from textsim import process

    cities_a = ["New York", "Chicago", "Houston"]
    cities_b = ["New Yrok", "Chigaco", "Housten", "Dallas"]

    for city in cities_a:
        print(f"  {city:<10} → {process.extract(city, cities_b, limit=2)}")

    try:
        matrix = process.cdist(cities_a, cities_b)
    except ImportError:
        print("\n  [cdist skipped — numpy not installed]")
        return

    print("\n  Distance matrix (rows=queries, cols=choices):\n")
    header = "".ljust(12) + "".join(c.center(10) for c in cities_b)
    print(f"  {header}")
    print(f"  {'─' * len(header)}")
    for i, city in enumerate(cities_a):
        row = city.ljust(12) + "".join(str(matrix[i][j]).center(10) for j in range(len(cities_b)))
        print(f"  {row}")


# ──────────────────────────────────────────────────────────────
# Main
# ──────────────────────────────────────────────────────────────

if __name__ == "__main__":
    example_distance()
    example_pairwise()
    example_reference()
    example_extract()

    print("\n✅  All examples completed!\n")
