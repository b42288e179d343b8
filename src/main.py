"""
Example usage of the sprocgen library.
"""

import pandas as pd

from sprocgen import DataFrameBackend, GenerationOptions, SprocGenerator, StreamSink


def main():
    """Demonstrate sprocgen usage on an in-memory catalog extract."""
    catalog = pd.DataFrame(
        [
            ("Widgets", "id", "int", 4, 10, 1, True, False),
            ("Widgets", "name", "varchar", 50, 0, 2, False, False),
            ("Widgets", "price", "decimal", 10, 2, 3, False, False),
            ("Widgets", "total", "int", 4, 10, 4, False, True),
        ],
        columns=[
            "table_name",
            "column_name",
            "data_type",
            "max_length",
            "precision",
            "column_id",
            "is_identity",
            "is_computed",
        ],
    )

    options = GenerationOptions(database="Inventory", server="localhost")

    try:
        with SprocGenerator(DataFrameBackend(catalog), StreamSink(), options) as generator:
            print(f"Available tables: {generator.backend.get_tables()}")
            generator.process_table("Widgets")
    except Exception as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
