SENTINEL = "$"

CHECKPOINT_INTERVAL = 5     # C: keep counts at every C-th transform position
SUFFIX_ARRAY_INTERVAL = 5   # K: keep suffix array entries whose offset is a multiple of K
MAX_MISMATCHES = 1          # d for read mapping
RUN_LENGTH = 10             # minimum run length counted by bwt-runs
