"""Main CLI entry point for emlkit."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from emlkit.config.config_loader import ConfigLoader
from emlkit.models import MailMessage
from emlkit.services.mime.eml_importer import EmlImporter
from emlkit.services.mime.encoder import encode_base64_body
from emlkit.storage.audit_log import AuditLog


def format_summary(path: Path, message: MailMessage) -> str:
    """Render a short human-readable summary of an imported message."""
    lines = [f"## {path.name}"]
    lines.append(f"From:    {', '.join(message.get_from())}")
    lines.append(f"To:      {', '.join(message.get_to())}")
    if message.get_cc():
        lines.append(f"Cc:      {', '.join(message.get_cc())}")
    lines.append(f"Subject: {message.subject}")
    lines.append(f"Date:    {message.date.isoformat() if message.date else ''}")
    lines.append(f"Charset: {message.charset} | Encoding: {message.encoding.value}")

    body = message.get_body()
    if body is not None:
        lines.append("")
        lines.append(body)
    return "\n".join(lines)


def import_emails(
    eml_paths: list[Path],
    config_path: Optional[Path] = None,
    verbose: bool = False,
) -> int:
    """
    Import EML files and print a summary for each.

    Args:
        eml_paths: EML files to import
        config_path: Optional custom config file path
        verbose: Also print partial results of failed imports

    Returns:
        Number of failed imports
    """
    config = ConfigLoader(config_path).load_app_config()
    audit_log = AuditLog(config.storage.get_audit_log_path())
    importer = EmlImporter(audit_log=audit_log)

    failures = 0
    for eml_path in eml_paths:
        result = importer.import_file(eml_path)

        if result.ok:
            print(format_summary(eml_path, result.message))
            print()
            continue

        failures += 1
        print(f"Error: {result.error}", file=sys.stderr)
        if verbose:
            print(format_summary(eml_path, result.message))
            print()

    return failures


def cmd_import(args) -> int:
    """Import command."""
    eml_paths = [Path(p) for p in args.emails]
    failures = import_emails(eml_paths, args.config, args.verbose)
    return 1 if failures else 0


def cmd_encode(args) -> int:
    """Encode a file as a line-wrapped base64 MIME body."""
    config = ConfigLoader(args.config).load_app_config()
    audit_log = AuditLog(config.storage.get_audit_log_path())

    source = Path(args.file)
    data = source.read_bytes()
    encoded = encode_base64_body(data, line_width=config.encoding.line_width)

    if args.output:
        Path(args.output).write_bytes(encoded)
    else:
        sys.stdout.buffer.write(encoded)
        sys.stdout.flush()

    audit_log.log_encode(source, args.output, len(data), len(encoded))
    return 0


def cmd_export(args) -> int:
    """Export audit events command."""
    config = ConfigLoader(args.config).load_app_config()
    audit_log = AuditLog(config.storage.get_audit_log_path())

    output_path = Path(args.output) if args.output else Path("emlkit_events.json")
    audit_log.export_events(output_path)

    print(f"Audit events exported to: {output_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="emlkit - MIME body encoding and EML import")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    import_parser = subparsers.add_parser("import", help="Import EML files and print a summary")
    import_parser.add_argument("emails", nargs="+", help="EML file(s) to import")
    import_parser.add_argument("--config", type=Path, help="Custom config file path")
    import_parser.add_argument("--verbose", action="store_true", help="Show partial results on failure")

    encode_parser = subparsers.add_parser("encode", help="Encode a file as a base64 MIME body")
    encode_parser.add_argument("file", help="File to encode")
    encode_parser.add_argument("--config", type=Path, help="Custom config file path")
    encode_parser.add_argument("--output", type=Path, help="Output file (default: stdout)")

    export_parser = subparsers.add_parser("export", help="Export audit events")
    export_parser.add_argument("--config", type=Path, help="Custom config file path")
    export_parser.add_argument("--output", type=Path, help="Output file path")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "import":
        return cmd_import(args)
    elif args.command == "encode":
        return cmd_encode(args)
    elif args.command == "export":
        return cmd_export(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
