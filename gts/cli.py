import argparse
import sys
import time

from .compiler import speak_go_file, speak_go_source
from .config.options import SpeechOptions
from .exceptions import GoSpeechError, InternalSpeakerError
from .speech.sinks import build_sink
from .utils import TerminalColors

# This provides a single source of truth for stage names and their order.
STAGE_MAP = {
    "1": ("ast", "Abstract Syntax Tree"),
    "2": ("utterances", "Utterance Transcript"),
}


def build_arg_parser() -> argparse.ArgumentParser:
    # Dynamically generate help text for the --dump argument
    stage_help_text = "Stop after a specific stage and save its artifact as JSON. "
    for key, (name, desc) in STAGE_MAP.items():
        stage_help_text += f"'{key}' for {desc}. "

    parser = argparse.ArgumentParser(description="Read Go source files out loud.")
    parser.add_argument(
        "input_files",
        nargs="*",
        help="The Go files to speak. Omit to read from stdin.",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Walk the files without producing any audio.")
    parser.add_argument("--noimports", dest="skip_imports", action="store_true", help="Do not speak the import section.")
    parser.add_argument("--command", default="say", help="The text-to-speech command to run for each utterance (default: say).")
    parser.add_argument("--voice", default=None, help="Voice passed to the speech command with -v.")
    parser.add_argument("--rate", type=int, default=None, help="Speaking rate passed to the speech command with -r.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print every utterance before it is spoken.")
    parser.add_argument("-d", "--dump", type=str, choices=STAGE_MAP.keys(), help=stage_help_text)
    return parser


def main():
    start_time = time.perf_counter()

    parser = build_arg_parser()
    args = parser.parse_args()

    # --- Input Validation ---
    if not args.input_files and sys.stdin.isatty():
        parser.error("input_files are required when not reading from a pipe.")

    options = SpeechOptions(
        quiet=args.quiet,
        skip_imports=args.skip_imports,
        command=args.command,
        voice=args.voice,
        rate=args.rate,
        verbose=args.verbose,
    )
    sink = build_sink(options)

    # --- Determine Pipeline Stop Point ---
    stop_after_stage, stage_desc = STAGE_MAP[args.dump] if args.dump else (None, None)
    dump_stages = [stop_after_stage] if stop_after_stage else []

    failed = False
    try:
        for name in args.input_files or [None]:
            display_name = name or "stdin"
            print(f"--- Speaking {display_name} ---")

            try:
                if name is None:
                    result = speak_go_source(sys.stdin.read(), None, sink, options, dump_stages, stop_after_stage)
                else:
                    result = speak_go_file(name, sink, options, dump_stages, stop_after_stage)

            # --- Error Handling ---
            except GoSpeechError as e:
                print(f"\n{TerminalColors.RED}--- SYNTAX ERROR ---\n{e}{TerminalColors.RESET}", file=sys.stderr)
                failed = True
                continue
            except InternalSpeakerError as e:
                print(f"\n{TerminalColors.RED}--- UNEXPECTED SPEAKER ERROR ---{TerminalColors.RESET}", file=sys.stderr)
                print("This may be a bug in the speaker. Please report it.", file=sys.stderr)
                print(f"{type(e).__name__}: {e}", file=sys.stderr)
                failed = True
                continue
            except (OSError, UnicodeDecodeError) as e:
                print(f"{TerminalColors.RED}ERROR: Could not read '{display_name}': {e}{TerminalColors.RESET}", file=sys.stderr)
                failed = True
                continue

            if result is None:
                failed = True
            elif stop_after_stage:
                print(f"{TerminalColors.GREEN}--- Stopped after stage '{args.dump} ({stage_desc})' ---{TerminalColors.RESET}")
            else:
                print(f"{TerminalColors.GREEN}--- Spoke {display_name}: {len(result)} utterances ---{TerminalColors.RESET}")

        failures = getattr(sink, "failures", 0)
        if failures:
            print(f"{TerminalColors.YELLOW}--- {failures} utterances could not be spoken ---{TerminalColors.RESET}", file=sys.stderr)

    finally:
        # --- Execution Time ---
        end_time = time.perf_counter()
        duration = end_time - start_time
        print(f"\n{TerminalColors.CYAN}--- Total Execution Time: {duration:.4f} seconds ---{TerminalColors.RESET}")

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
