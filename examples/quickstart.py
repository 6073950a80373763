"""
strsim — Quick-start examples with dummy data.

Run:  uv run python examples/quickstart.py
"""

from __future__ import annotations


def divider(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


# ──────────────────────────────────────────────────────────────
# 1. Edit distances  (strsim.hamming / strsim.levenshtein)
# ──────────────────────────────────────────────────────────────

def example_edit_distance() -> None:
    divider("1 · Edit Distances")

    import strsim

    pairs = [
        ("kitten", "sitting"),
        ("hello, world", "bye, world"),
        ("hamming", "hammers"),
        ("café", "cafe"),
    ]

    for s1, s2 in pairs:
        print(f'  levenshtein("{s1}", "{s2}") = {strsim.levenshtein(s1, s2)}')
        try:
            print(f'  hamming                          = {strsim.hamming(s1, s2)}')
        except strsim.DifferentLengthArgs as exc:
            print(f"  hamming                          = n/a ({exc.len1} vs {exc.len2} chars)")
        print()


# ──────────────────────────────────────────────────────────────
# 2. Similarity scores  (strsim.jaro / strsim.jaro_winkler)
# ──────────────────────────────────────────────────────────────

def example_similarity() -> None:
    divider("2 · Jaro / Jaro-Winkler")

    import strsim

    pairs = [
        ("martha", "marhta"),
        ("dixon", "dicksonx"),
        ("cheeseburger", "cheese fries"),
        ("Dinsdale", "D"),
    ]

    for s1, s2 in pairs:
        print(f'  jaro("{s1}", "{s2}")         = {strsim.jaro(s1, s2):.3f}')
        print(f"  jaro_winkler                     = {strsim.jaro_winkler(s1, s2):.3f}")
        print()


# ──────────────────────────────────────────────────────────────
# 3. Metric modules  (strsim.distance.*)
# ──────────────────────────────────────────────────────────────

def example_metric_modules() -> None:
    divider("3 · Metric Modules (strsim.distance)")

    from strsim.distance import Hamming, JaroWinkler, Levenshtein

    print(f'  Levenshtein.normalized_similarity("kitten", "sitting") '
          f'= {Levenshtein.normalized_similarity("kitten", "sitting"):.3f}')
    print(f'  Levenshtein.distance("a", "b", weights=(1, 1, 2)) '
          f'= {Levenshtein.distance("a", "b", weights=(1, 1, 2))}')
    print(f'  Hamming.normalized_distance("abcd", "abxx") '
          f'= {Hamming.normalized_distance("abcd", "abxx"):.2f}')
    print(f'  Levenshtein.distance("HELLO", "hello", processor=str.lower) '
          f'= {Levenshtein.distance("HELLO", "hello", processor=str.lower)}')
    print(f'  JaroWinkler.similarity("thequickbrownfoxjumpedoverx", '
          f'"thequickbrownfoxjumpedovery") = '
          f'{JaroWinkler.similarity("thequickbrownfoxjumpedoverx", "thequickbrownfoxjumpedovery"):.4f}')
    print(f'  Levenshtein.distance(["the", "cat"], ["the", "dog"]) '
          f'= {Levenshtein.distance(["the", "cat"], ["the", "dog"])}')


if __name__ == "__main__":
    example_edit_distance()
    example_similarity()
    example_metric_modules()
