from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .config import CONFIG_FILENAME, RankConfig, load_project_config
from .editor import first_two, insert_before_last, last_two, rotate_first_two_to_end
from .errors import ConfigError, WordRankError
from .policies import available_policies, get_policy
from .ranking import WordRanker, high_scoring_words, word_scores

EDIT_OPERATIONS = {
    "first-two": first_two,
    "last-two": last_two,
    "rotate": rotate_first_two_to_end,
}


def _load_config(args) -> RankConfig:
    if args.config:
        return RankConfig.load(Path(args.config))
    return load_project_config(Path.cwd())


def _setup_logging(args, config: RankConfig) -> None:
    level = (args.log_level or os.getenv("WORDRANK_LOG_LEVEL") or config.logging.level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"unknown log level '{level}'")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _words(args, config: RankConfig) -> list[str]:
    return list(args.words) if args.words else list(config.words)


def cmd_demo(args, config: RankConfig):
    """Rank the demo words by the base and demo policies."""
    from .demo import run_demo

    run_demo(sys.stdout)


def cmd_rank(args, config: RankConfig):
    scorer = get_policy(args.policy or config.policy)
    ranker = WordRanker(scorer)
    for item in ranker.rank(_words(args, config)):
        if args.scores:
            print(f"{item.word}\t{item.score}")
        else:
            print(item.word)


def cmd_scores(args, config: RankConfig):
    words = _words(args, config)
    scorer = get_policy(args.policy or config.policy)
    for word, value in zip(words, word_scores(words, scorer)):
        print(f"{word}\t{value}")


def cmd_filter(args, config: RankConfig):
    scorer = get_policy(args.policy or config.policy)
    threshold = config.threshold if args.threshold is None else args.threshold
    for word in high_scoring_words(_words(args, config), scorer, threshold):
        print(word)


def cmd_edit(args, config: RankConfig):
    words = _words(args, config)
    if args.op == "insert-before-last":
        if args.element is None:
            raise WordRankError("insert-before-last needs --element")
        result = insert_before_last(words, args.element)
    else:
        result = EDIT_OPERATIONS[args.op](words)
    print(" ".join(result))


def cmd_policies(args, config: RankConfig):
    for name in available_policies():
        print(f"{name}\t{get_policy(name).description}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="wordrank", description="Rank and slice word lists")
    p.add_argument("--config", default=None, help=f"Config file (default: nearest {CONFIG_FILENAME})")
    p.add_argument("--log-level", default=None, help="Logging level (default: WARNING)")
    p.add_argument("--trace", action="store_true", help="Print OpenTelemetry spans to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sd = sub.add_parser("demo", help="Rank the demo words by the base and demo policies")
    sd.set_defaults(func=cmd_demo)

    sr = sub.add_parser("rank", help="Rank words by descending score")
    sr.add_argument("words", nargs="*", help="Words to rank (default: config words)")
    sr.add_argument("--policy", default=None, help="Scoring policy name")
    sr.add_argument("--scores", action="store_true", help="Print scores next to words")
    sr.set_defaults(func=cmd_rank)

    ss = sub.add_parser("scores", help="Print the score of each word in input order")
    ss.add_argument("words", nargs="*")
    ss.add_argument("--policy", default=None, help="Scoring policy name")
    ss.set_defaults(func=cmd_scores)

    sf = sub.add_parser("filter", help="Print words scoring strictly above a threshold")
    sf.add_argument("words", nargs="*")
    sf.add_argument("--policy", default=None, help="Scoring policy name")
    sf.add_argument("--threshold", type=int, default=None, help="Cutoff (default: config, 1)")
    sf.set_defaults(func=cmd_filter)

    se = sub.add_parser("edit", help="Slice or reorder a word list")
    se.add_argument("op", choices=[*EDIT_OPERATIONS, "insert-before-last"])
    se.add_argument("words", nargs="*")
    se.add_argument("--element", default=None, help="Element for insert-before-last")
    se.set_defaults(func=cmd_edit)

    sp = sub.add_parser("policies", help="List scoring policies")
    sp.set_defaults(func=cmd_policies)

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = _load_config(args)
        _setup_logging(args, config)
        config.register_policies()
    except WordRankError as e:
        print(f"[wordrank] error: {e}", file=sys.stderr)
        return 2

    tracing = args.trace or config.telemetry.enabled
    if tracing:
        from .telemetry import init_telemetry

        init_telemetry(
            service_name=config.telemetry.service_name,
            exporter="console" if args.trace else config.telemetry.exporter,
            endpoint=config.telemetry.endpoint,
        )

    try:
        args.func(args, config)
    except WordRankError as e:
        print(f"[wordrank] error: {e}", file=sys.stderr)
        return 2
    finally:
        if tracing:
            from .telemetry import shutdown_telemetry

            shutdown_telemetry()
    return 0


if __name__ == "__main__":
    sys.exit(main())
