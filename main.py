"""
Main entry point for Interview Insights.
Provides a CLI for summarizing exported interviews.
"""
import json
import sys

import config
from interviews import load_interview, get_available_exports, InterviewLoadError
from summarizer import summarize_interview


def print_separator():
    print("=" * 60)


def print_statements(heading: str, statements):
    print(f"  {heading}:")
    if not statements:
        print("    (none)")
    for statement in statements:
        print(f"    - {statement}")


def print_report(summary):
    """Print a human-readable interview summary."""
    print_separator()
    title = "INTERVIEW SUMMARY"
    if summary.get("candidate_name"):
        title += f" - {summary['candidate_name']}"
    print(title)
    print_separator()

    stats = summary["stats"]
    print(f"\nStatus: {summary['status']}")
    print(f"Total Questions: {stats['total_questions']}")
    print(f"Completed: {stats['completed']}")
    print(f"Skipped: {stats['skipped']}")
    print(f"Average Rating: {stats['average_rating']:.1f}/5 ({stats['rated']} rated)")

    for section in summary["sections"]:
        print(f"\n{section['section_title']}")
        print("-" * 40)
        print_statements("Strengths", section["strengths"])
        print_statements("Gaps", section["gaps"])

    if summary.get("overall_notes"):
        print("\nOverall Notes:")
        print("-" * 40)
        print(f"  {summary['overall_notes']}")

    print()


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Interview Insights - strengths and gaps from interviewer feedback",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py exports/interview_42.json              # Full report
  python main.py exports/interview_42.json --json       # Summary as JSON
  python main.py exports/interview_42.json --section "Algorithms"
  python main.py --list                                 # List exports
        """,
    )
    parser.add_argument("export", nargs="?", help="Path to an exported interview JSON file")
    parser.add_argument(
        "--section",
        help="Only report this section",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the summary as JSON",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List exports in the exports directory and exit",
    )

    args = parser.parse_args(argv)

    try:
        config.validate_config()
    except RuntimeError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.list:
        print(f"\nAvailable Exports ({config.EXPORTS_DIR}):")
        for name in get_available_exports():
            print(f"  - {name}")
        return

    if not args.export:
        parser.error("an export file is required unless --list is given")

    try:
        interview = load_interview(args.export)
    except (FileNotFoundError, InterviewLoadError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    summary = summarize_interview(interview)

    if args.section:
        sections = [s for s in summary["sections"] if s["section_title"] == args.section]
        if not sections:
            print(f"Error: section not found: {args.section}", file=sys.stderr)
            sys.exit(1)
        summary["sections"] = sections

    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        print_report(summary)


if __name__ == "__main__":
    main()
