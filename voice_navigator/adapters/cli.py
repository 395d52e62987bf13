"""
CLI Adapter - Command-line interface.

Thin wrapper that loads an HTML page into the in-memory DOM and drives
the simulator with replayed keys.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from voice_navigator.config import NavigatorConfig
from voice_navigator.dom.events import KeyEvent
from voice_navigator.engine import ScreenReaderSimulator
from voice_navigator.platform import HostInfo, detect_platform
from voice_navigator.speech.base import BaseSpeech, SpeechPort, Utterance, Voice


# Short names accepted by "run" in addition to raw key identifiers.
KEY_ALIASES = {
    "next": "ArrowRight",
    "n": "ArrowRight",
    "prev": "ArrowLeft",
    "previous": "ArrowLeft",
    "p": "ArrowLeft",
    "enter": "Enter",
    "activate": "Enter",
}


class EchoSpeech(BaseSpeech):
    """Prints every utterance, then forwards it to an optional host."""
    
    def __init__(self, inner: Optional[SpeechPort] = None, stream=None) -> None:
        super().__init__()
        self._inner = inner
        self._stream = stream or sys.stdout
        if inner is not None:
            inner.on_voices_changed(self.notify_voices_changed)
    
    def get_voices(self) -> list[Voice]:
        return self._inner.get_voices() if self._inner is not None else []
    
    def speak(self, utterance: Utterance) -> None:
        print(f"  > {utterance.text}", file=self._stream)
        if self._inner is not None:
            self._inner.speak(utterance)
    
    def cancel(self) -> None:
        if self._inner is not None:
            self._inner.cancel()


def main(args: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="voice-navigator",
        description="Screen-reader style keyboard/touch navigation simulator",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    
    subparsers = parser.add_subparsers(dest="command", help="Commands")
    
    scan_parser = subparsers.add_parser("scan", help="List focusable elements of a page")
    _add_page_options(scan_parser)
    
    run_parser = subparsers.add_parser("run", help="Replay keys against a page")
    _add_page_options(run_parser)
    run_parser.add_argument(
        "keys",
        nargs="*",
        help="Keys: next/prev/enter or raw names (ArrowRight, ArrowLeft, Enter)",
    )
    run_parser.add_argument(
        "--speech",
        choices=["print", "tone", "system"],
        default="print",
        help="Speech host (default: print)",
    )
    run_parser.add_argument("-o", "--output-dir", help="WAV output directory (tone speech)")
    run_parser.add_argument("--user-agent", default="", help="Host user agent")
    run_parser.add_argument("--platform", default="", help="Host platform identifier")
    
    detect_parser = subparsers.add_parser("detect", help="Classify a host platform")
    detect_parser.add_argument("--user-agent", default="", help="Host user agent")
    detect_parser.add_argument("--platform", default="", help="Host platform identifier")
    detect_parser.add_argument("--touch-points", type=int, default=0, help="Max touch points")
    
    subparsers.add_parser("version", help="Show version")
    
    parsed, extra = parser.parse_known_args(args)
    if extra:
        # Keys may follow options: run PAGE --english next prev
        if parsed.command != "run" or any(token.startswith("-") for token in extra):
            parser.error(f"unrecognized arguments: {' '.join(extra)}")
        parsed.keys = list(parsed.keys) + extra
    
    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    
    if parsed.command is None:
        parser.print_help()
        return 0
    
    if parsed.command == "version":
        from voice_navigator import __version__
        print(f"voice-navigator {__version__}")
        return 0
    
    if parsed.command == "detect":
        platform = detect_platform(parsed.user_agent, parsed.platform, parsed.touch_points)
        print(platform.name)
        return 0
    
    if parsed.command == "scan":
        return _cmd_scan(parsed)
    
    if parsed.command == "run":
        return _cmd_run(parsed)
    
    return 1


def _add_page_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("page", help="HTML file to navigate")
    parser.add_argument("--container", help="id of the element to navigate (default: body)")
    parser.add_argument("--locale", help="Target locale (default: ko-KR)")
    parser.add_argument("--english", action="store_true", help="English role/state labels")


def _build_config(args: argparse.Namespace) -> NavigatorConfig:
    config = NavigatorConfig.english() if args.english else NavigatorConfig()
    if args.locale:
        config = config.with_overrides(locale=args.locale)
    return config


def _load_container(args: argparse.Namespace):
    from voice_navigator.dom.html import load_html_file
    
    path = Path(args.page)
    if not path.exists():
        print(f"Error: File not found: {path}", file=sys.stderr)
        return None, None
    
    document = load_html_file(path)
    if args.container:
        container = document.get_element_by_id(args.container)
        if container is None:
            print(f"Error: No element with id '{args.container}'", file=sys.stderr)
            return document, None
        return document, container
    return document, document.body


def _cmd_scan(args: argparse.Namespace) -> int:
    """List the elements a session would visit, with their announcements."""
    _, container = _load_container(args)
    if container is None:
        return 1
    
    sim = ScreenReaderSimulator(None, config=_build_config(args))
    sim.activate(container)
    
    print(f"{len(sim.elements)} focusable elements:")
    for index, element in enumerate(sim.elements):
        print(f"  {index:3d}  {element.role.name.lower():6}  {sim.announcer.describe(element)}")
    
    sim.close()
    return 0


def _cmd_run(args: argparse.Namespace) -> int:
    """Replay keys and print what would be spoken."""
    document, container = _load_container(args)
    if container is None:
        return 1
    
    try:
        speech = EchoSpeech(_build_speech(args))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    
    sim = ScreenReaderSimulator(
        speech,
        keyboard=document,
        host=HostInfo(user_agent=args.user_agent, platform=args.platform),
        config=_build_config(args),
    )
    if sim.voice is not None:
        print(f"Voice: {sim.voice.name} ({sim.voice.lang})")
    
    sim.activate(container)
    for key in args.keys:
        name = KEY_ALIASES.get(key.lower(), key)
        print(f"[{name}]")
        document.dispatch_event("keydown", KeyEvent(name))
        if document.location:
            print(f"  -> followed {document.location}")
            document.location = None
    
    sim.close()
    return 0


def _build_speech(args: argparse.Namespace) -> Optional[SpeechPort]:
    if args.speech == "tone":
        from voice_navigator.hosts.tone import ToneSpeech
        output_dir = Path(args.output_dir) if args.output_dir else None
        return ToneSpeech(output_dir=output_dir)
    
    if args.speech == "system":
        from voice_navigator.hosts.system import SystemSpeech
        return SystemSpeech()
    
    return None


if __name__ == "__main__":
    sys.exit(main())
