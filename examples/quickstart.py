# %% [markdown]
# # wordsim: Quickstart
#
# Find near-duplicate words in a vocabulary.
#
# ```
# "recieve"    vs  "receive"
# "Jon Smith"  vs  "John Smith"
# "colour"     vs  "color"
# ```

# %%
import time

import wordsim as ws

# %% [markdown]
# ## Part 1: Pairs above a threshold
#
# Lines are lowercased and stripped of whitespace, then every pair is scored.

# %%
vocabulary = [
    "Colour",
    "color",
    "flavour",
    "flavor",
    "Jon Smith",
    "John Smith",
    "neighbour",
    "neighbor",
    "cat",
]

tokens = ws.normalize_lines(vocabulary)
pairs = ws.find_similar_pairs(tokens, min_match=0.8)

for line in ws.format_report(pairs):
    print(line, end="")

# %% [markdown]
# ## Part 2: Choosing an algorithm
#
# Transpositions cost two edits under Levenshtein but one under OSA.

# %%
swapped = ws.normalize_lines(["hello world", "hello wrold"])
for algo in [ws.Algorithm.LEVENSHTEIN, ws.Algorithm.OSA, ws.Algorithm.JARO_WINKLER]:
    best = ws.find_similar_pairs(swapped, 0.0, algorithm=algo)[0]
    print(f"{algo.value:>14}: {best.similarity:.2%}")

# %% [markdown]
# ## Part 3: Larger inputs
#
# Scoring runs on a thread pool. The progress callback receives the number
# of pairs finished per block.

# %%
words = [f"item {i:05d}" for i in range(3_000)]
done = []

start = time.perf_counter()
pairs = ws.find_similar_pairs(ws.normalize_lines(words), 0.9, progress=done.append)
elapsed = time.perf_counter() - start

print(f"{sum(done):,} pairs scored in {elapsed:.2f}s, {len(pairs):,} at or above 90%")

# %% [markdown]
# ## Part 4: Polars
#
# Results as a DataFrame, ready to join back to the source data.

# %%
print(ws.similar_pairs(vocabulary, min_similarity=0.75))
