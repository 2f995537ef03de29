"""
Job Screener CLI - Command line interface for requirement screening and answer autofill.

Usage:
    python -m job_screener [command] [options]

Commands:
    scan          Scan a job posting for screening requirements you may not meet
    classify      Classify an application question
    answer        Suggest an answer from your answer bank
    save-answer   Store an answer in your answer bank
    init-bank     Create a starter answer bank from a profile summary
    profile       Manage your requirement profile
    config        Manage configuration

Examples:
    python -m job_screener scan --job posting.pdf --profile requirement_profile.json
    python -m job_screener answer "Why do you want to join us?" --company Acme
    python -m job_screener save-answer "Are you willing to travel?" "Yes, up to 25%."
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from job_screener.autofill import AnswerMatcher, QuestionClassifier, generate_default_answer_bank
from job_screener.core import ProfileLoader, RequirementScanner, format_gap
from job_screener.utils import Config


def main(argv: Optional[list[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Job Screener - Requirement gap scanning and application answer autofill",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", help="Path to config file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Scan command
    scan_parser = subparsers.add_parser("scan", help="Scan a job posting for requirement gaps")
    scan_parser.add_argument("--job", "-j", required=True, help="Job posting file (txt, md, json, pdf, docx)")
    scan_parser.add_argument("--profile", "-p", help="Requirement profile file (JSON)")
    scan_parser.add_argument("--json", action="store_true", help="Print gaps as JSON")

    # Classify command
    classify_parser = subparsers.add_parser("classify", help="Classify a question")
    classify_parser.add_argument("question", help="Question text")

    # Answer command
    answer_parser = subparsers.add_parser("answer", help="Suggest an answer from the bank")
    answer_parser.add_argument("question", help="Question text")
    answer_parser.add_argument("--company", "-c", help="Company name for placeholders")
    answer_parser.add_argument("--bank", "-b", help="Answer bank file (JSON)")

    # Save-answer command
    save_parser = subparsers.add_parser("save-answer", help="Store an answer in the bank")
    save_parser.add_argument("question", help="Question text")
    save_parser.add_argument("answer", help="Answer text")
    save_parser.add_argument("--bank", "-b", help="Answer bank file (JSON)")

    # Init-bank command
    init_parser = subparsers.add_parser("init-bank", help="Create a starter answer bank")
    init_parser.add_argument("--summary", "-s", required=True, help="Profile summary file (JSON)")
    init_parser.add_argument("--bank", "-b", help="Answer bank file to write")
    init_parser.add_argument("--force", action="store_true", help="Overwrite an existing bank")

    # Profile command
    profile_parser = subparsers.add_parser("profile", help="Manage requirement profile")
    profile_parser.add_argument("--show", help="Show profile from file")
    profile_parser.add_argument("--create-sample", action="store_true", help="Create sample profile")
    profile_parser.add_argument("--output", "-o", help="Output file for profile")

    # Config command
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument("--show", action="store_true", help="Show current config")
    config_parser.add_argument("--set", nargs=2, metavar=("KEY", "VALUE"), help="Set a config value")
    config_parser.add_argument("--init", action="store_true", help="Initialize default config")

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Load configuration
    config = Config(args.config)
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    commands = {
        "scan": cmd_scan,
        "classify": cmd_classify,
        "answer": cmd_answer,
        "save-answer": cmd_save_answer,
        "init-bank": cmd_init_bank,
        "profile": cmd_profile,
        "config": cmd_config,
    }

    # Execute command
    try:
        commands[args.command](args, config)
    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        sys.exit(1)
    except (OSError, ValueError, ImportError) as e:
        print(f"\nError: {e}")
        sys.exit(1)


def _build_matcher(config: Config) -> AnswerMatcher:
    options = config.get_matching_options()
    classifier = QuestionClassifier(keyword_threshold=options["keyword_threshold"])
    return AnswerMatcher(
        classifier=classifier,
        placeholder=options["placeholder"],
        min_shared_words=options["min_shared_words"],
    )


def cmd_scan(args, config: Config):
    """Execute scan command."""
    loader = ProfileLoader()
    job_text = loader.read_job_posting(args.job)
    profile = loader.load_requirement_profile(args.profile or config.get_profile_path())

    gaps = RequirementScanner().scan(job_text, profile)

    if args.json:
        print(json.dumps([gap.to_dict() for gap in gaps], indent=2))
        return

    if not gaps:
        print("No requirement gaps found.")
        return

    print(f"\nRequirement gaps ({len(gaps)}):\n")
    for gap in gaps:
        print(f"  {format_gap(gap)}")


def cmd_classify(args, config: Config):
    """Execute classify command."""
    kind = _build_matcher(config).classifier.classify(args.question)
    print(kind.value if kind else "uncategorized")


def cmd_answer(args, config: Config):
    """Execute answer command."""
    loader = ProfileLoader()
    bank = loader.load_answer_bank(args.bank or config.get_answer_bank_path())

    suggestion = _build_matcher(config).suggest(args.question, bank, args.company)

    if suggestion.answer is None:
        category = suggestion.kind.value if suggestion.kind else "uncategorized"
        print(f"No answer in bank (category: {category})")
        return

    print(suggestion.answer)


def cmd_save_answer(args, config: Config):
    """Execute save-answer command."""
    loader = ProfileLoader()
    bank_path = args.bank or config.get_answer_bank_path()
    bank = loader.load_answer_bank(bank_path)

    matcher = _build_matcher(config)
    updated = matcher.add(args.question, args.answer, bank)
    loader.save_answer_bank(updated, bank_path)

    kind = matcher.classifier.classify(args.question)
    print(f"Saved answer ({kind.value if kind else 'custom'}) to {bank_path}")


def cmd_init_bank(args, config: Config):
    """Execute init-bank command."""
    loader = ProfileLoader()
    bank_path = args.bank or config.get_answer_bank_path()

    if Path(bank_path).exists() and not args.force:
        print(f"Answer bank already exists at {bank_path}. Use --force to overwrite.")
        return

    summary = loader.load_profile_summary(args.summary)
    bank = generate_default_answer_bank(summary)
    loader.save_answer_bank(bank, bank_path)

    print(f"Created answer bank with {len(bank.common_questions)} answers: {bank_path}")


def cmd_profile(args, config: Config):
    """Execute profile command."""
    loader = ProfileLoader()

    if args.create_sample:
        output = args.output or config.get_profile_path()
        loader.create_sample_profile(output)
        print(f"Created sample profile: {output}")

    elif args.show:
        profile = loader.load_requirement_profile(args.show)
        print(json.dumps(profile.to_dict(), indent=2))

    else:
        print("Use --show or --create-sample")


def cmd_config(args, config: Config):
    """Execute config command."""
    if args.init:
        config.save()
        print(f"Created config at: {config.config_path}")

    elif args.show:
        config.print_config()

    elif args.set:
        key, value = args.set
        # Try to parse as JSON for complex values
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            pass

        config.set(key, value)
        config.save()
        print(f"Set {key} = {value}")

    else:
        print("Use --show, --set, or --init")


if __name__ == "__main__":
    main()
