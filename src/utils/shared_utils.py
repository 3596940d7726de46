# src/utils/shared_utils.py


def pick_from_table(rng, table, table_name="table"):
    """
    Uniformly pick one entry of a fixed table using the given random source.
    """
    if not table:
        raise ValueError(f"Lookup table '{table_name}' is empty.")
    return table[rng.randrange(len(table))]
