"""Benchmark exact lookups and fuzzy suggestions on synthetic vocabularies.

Run from the repository root:

    python -m benchmarks.run_benchmarks_suggest
"""

import gc
import json
import random
import string
import time
import tracemalloc
from pathlib import Path

import matplotlib.pyplot as plt
import psutil

from src.spellchecker.dictionary import Dictionary

RESULTS_DIR = (
    Path(__file__).parent.parent / "static" / "benchmarks" / "suggest"
)
VOCABULARY_SIZES = [1_000, 10_000, 50_000, 100_000]
QUERIES_PER_RUN = 200
DISTANCES = [1, 2]
SEED = 1234


def generate_vocabulary(size: int, rng: random.Random) -> list[str]:
    """Generate `size` random lowercase words of 3 to 10 letters."""
    words = set()
    while len(words) < size:
        length = rng.randint(3, 10)
        words.add("".join(rng.choices(string.ascii_lowercase, k=length)))
    return list(words)


def misspell(word: str, rng: random.Random) -> str:
    """Replace one random letter of `word`."""
    index = rng.randrange(len(word))
    return word[:index] + rng.choice(string.ascii_lowercase) + word[index + 1 :]


def time_ms(func, queries: list[str]) -> float:
    """Return the average time of `func` over `queries` in milliseconds."""
    start = time.perf_counter()
    for query in queries:
        func(query)
    return (time.perf_counter() - start) * 1000 / len(queries)


def benchmark_size(size: int, rng: random.Random) -> dict[str, float]:
    """Build a dictionary of `size` words and time lookups on it."""
    process = psutil.Process()
    vocabulary = generate_vocabulary(size, rng)

    gc.collect()
    rss_before = process.memory_info().rss
    tracemalloc.start()

    build_start = time.perf_counter()
    dictionary = Dictionary()
    dictionary.add_words(vocabulary)
    build_ms = (time.perf_counter() - build_start) * 1000

    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    rss_after = process.memory_info().rss

    known = rng.sample(vocabulary, min(QUERIES_PER_RUN, size))
    misspelled = [misspell(word, rng) for word in known]

    results = {
        "build_ms": build_ms,
        "set_lookup_ms": time_ms(dictionary.contains, known),
        "trie_lookup_ms": time_ms(dictionary.contains_exact, known),
        "peak_traced_mb": peak / 1024 / 1024,
        "rss_delta_mb": (rss_after - rss_before) / 1024 / 1024,
    }
    for distance in DISTANCES:
        results[f"suggest_d{distance}_ms"] = time_ms(
            lambda word, d=distance: dictionary.suggest(word, d),
            misspelled,
        )
    return results


def plot_results(results: dict[int, dict[str, float]]) -> Path:
    """Draw the suggestion timings per vocabulary size."""
    sizes = list(results)
    x = range(len(sizes))
    try:
        plt.figure(figsize=(8, 5))
        for distance in DISTANCES:
            y_values = [results[size][f"suggest_d{distance}_ms"] for size in sizes]
            plt.plot(x, y_values, marker="o", label=f"distance {distance}")
            for i, v in enumerate(y_values):
                plt.text(i, v, f"{v:.2f}", ha="center", va="bottom")

        plt.xticks(x, [str(size) for size in sizes])
        plt.xlabel("Vocabulary size")
        plt.ylabel("Execution Time (ms)")
        plt.title("Average Suggestion Time per Query")
        plt.legend()
        plt.tight_layout()

        graph_path = RESULTS_DIR / "benchmark_suggest.png"
        plt.savefig(graph_path)
        return graph_path
    finally:
        plt.close("all")


def main() -> None:
    """Run all benchmarks and save the results."""
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    rng = random.Random(SEED)

    results: dict[int, dict[str, float]] = {}
    for size in VOCABULARY_SIZES:
        print(f"\n--- Benchmarking vocabulary of {size} words ---")
        results[size] = benchmark_size(size, rng)
        for name, value in results[size].items():
            print(f"{name}: {value:.4f}")
        gc.collect()

    results_json_path = RESULTS_DIR / "results.json"
    with open(results_json_path, "w", encoding="utf-8") as f:
        json.dump(results, f, indent=4)

    graph_path = plot_results(results)
    print(f"\nResults saved to {results_json_path} and {graph_path}")


if __name__ == "__main__":
    main()
