CONFIG = {
    "CELL_SIZE": 32,
    "INITIAL_DROP_MS": 1000,
    "DROP_STEP_MS": 100,
    "MIN_DROP_MS": 200,
    "LINES_PER_SPEEDUP": 10,
    "DAS_MS": 170,
    "ARR_MS": 30,
    "SEED": None,
    "LOG_LEVEL": "WARNING",
}
