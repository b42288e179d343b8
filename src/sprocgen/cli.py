"""
Command line interface for sprocgen.
"""

import argparse
import logging
import sys

from .backend import create_backend
from .config import ConnectionConfig, GenerationOptions
from .core import SprocGenerator
from .exceptions import SprocGenError
from .sinks import DirectorySink, StreamSink

logger = logging.getLogger("sprocgen")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sprocgen",
        description="Generate CRUD stored procedures and a C# record class for SQL Server tables.",
    )
    parser.add_argument("--table", action="append", required=True, help="table to generate code for (repeatable)")

    source = parser.add_argument_group("metadata source")
    source.add_argument("--server", help="the database server (SPROCGEN_SERVER)")
    source.add_argument("--database", help="the database (SPROCGEN_DATABASE)")
    source.add_argument("--user", help="the database user (SPROCGEN_USER)")
    source.add_argument("--password", help="the user password (SPROCGEN_PASSWORD)")
    source.add_argument("--port", type=int, help="the database port (SPROCGEN_PORT)")
    source.add_argument("--driver", help="the ODBC driver name (SPROCGEN_DRIVER)")
    source.add_argument("--catalog-csv", help="read column metadata from a CSV catalog extract instead")

    output = parser.add_argument_group("output")
    output.add_argument("--output-dir", default=".", help="directory for the generated files")
    output.add_argument("--stdout", action="store_true", help="print the generated code instead of writing files")
    output.add_argument("--prefix", default="stp", help="procedure name prefix")
    output.add_argument("--namespace", help="namespace of the generated class (defaults to the database)")

    parser.add_argument("--debug", action="store_true", help="enable debugging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.catalog_csv:
            backend = create_backend(args.catalog_csv)
            database, server = args.database, args.server
        else:
            config = ConnectionConfig.from_env(
                server=args.server,
                database=args.database,
                user=args.user,
                password=args.password,
                port=args.port,
                driver=args.driver,
            )
            backend = create_backend(config)
            database, server = config.database, config.server

        options = GenerationOptions(
            procedure_prefix=args.prefix,
            database=database,
            server=server,
            namespace=args.namespace,
        )
        sink = StreamSink() if args.stdout else DirectorySink(args.output_dir)

        with SprocGenerator(backend, sink, options) as generator:
            generator.process_tables(args.table)
    except SprocGenError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
