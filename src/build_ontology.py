#!/usr/bin/env python3
"""
Command-line script to translate an RF2 terminology snapshot into an ontology.

HOW TO RUN:
From the src directory, run:
    python build_ontology.py <format> <concepts> <descriptions> <stated_relationships> <concrete_domains> <output>

Formats:
    KRSS - KRSS2, parsable by the OWL API or by classifiers such as CEL
    OWL  - OWL RDF/XML
    OWLF - OWL 2 Functional Syntax

Example:
    python build_ontology.py OWLF sct2_Concept_Snapshot_INT_20120731.txt \\
        sct2_Description_Snapshot_INT_20120731.txt \\
        sct2_StatedRelationship_Snapshot_INT_20120731.txt \\
        der2_ccsRefset_ConcreteDomains_INT_20120731.txt \\
        res_StatedOWLF_Core_INT_20120731.owl

Exit status is 0 on success, 1 when some concept definitions were inconsistent
(the output is still written), and 2 on a fatal error (no output is written).
"""

import argparse
import logging
import sys

from ontology.config import TranslationConfig
from ontology.errors import TranslationError
from terminology import RF2SnapshotDataSource, TerminologySourceError
from translation import TranslationService

logger = logging.getLogger("build_ontology")

EXIT_OK = 0
EXIT_INCONSISTENT = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate an RF2 terminology snapshot into a description logic ontology",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # OWL functional syntax
  python build_ontology.py OWLF concepts.txt descriptions.txt stated.txt cds.txt out.owl

  # KRSS for the CEL classifier, with debug logging
  python build_ontology.py KRSS concepts.txt descriptions.txt stated.txt cds.txt out.krss --log-level DEBUG
        """
    )
    parser.add_argument("format", help="Output format: KRSS, OWL or OWLF")
    parser.add_argument("concepts", help="RF2 concepts snapshot file")
    parser.add_argument("descriptions", help="RF2 descriptions snapshot file")
    parser.add_argument("relationships", help="RF2 stated relationships snapshot file")
    parser.add_argument("concrete_domains", help="Concrete domain reference set snapshot file")
    parser.add_argument("output", help="Output file")
    parser.add_argument(
        "--env-file",
        help="Optional .env file with SCT_OWL_* overrides"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)"
    )
    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s: %(message)s")

    config = TranslationConfig.from_env(args.env_file)
    service = TranslationService(config)
    datasource = RF2SnapshotDataSource(args.concepts, args.descriptions,
                                       args.relationships, args.concrete_domains)

    try:
        # the format and the inputs are checked before anything is read
        service.registry.get_serializer(args.format)
        datasource.check_readable()
        report = service.translate_to_file(datasource, args.format, args.output)
    except TerminologySourceError as e:
        logger.error(str(e))
        return EXIT_FATAL
    except TranslationError as e:
        logger.error(str(e))
        return EXIT_FATAL
    except OSError as e:
        logger.error(f"can't write {args.output}: {e}")
        return EXIT_FATAL

    if not report.ok:
        logger.error(f"{len(report.issues)} concept(s) with inconsistent definitions:")
        for issue in report.issues:
            logger.error(f"  {issue}")
        return EXIT_INCONSISTENT

    logger.info(f"Done: {report.summary()}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
