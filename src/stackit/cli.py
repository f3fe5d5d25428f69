"""Command-line interface for StackIt AI."""

import argparse
import json
import logging
import sys

from .core.config import settings
from .core.constants import FileConstants
from .core.models import IMPROVABLE_KINDS, MODERATABLE_KINDS
from .services.ai_service import AIServiceFactory
from .utils.data_prep import export_to_json, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _emit(args, command, inputs, response):
    """Print the envelope and optionally export it."""
    print(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))
    
    if getattr(args, "out", None):
        export_to_json(prepare_export(command, inputs, response), args.out)
        print(f"Results exported to {args.out}")


def cmd_analyze(service, args):
    """Analyze a question's quality."""
    response = service.analyze_question(args.title, args.content)
    _emit(args, "analyze", {"title": args.title, "content": args.content}, response)


def cmd_answer(service, args):
    """Draft an answer for a question."""
    response = service.generate_answer_suggestion(args.title, args.content)
    _emit(args, "answer", {"title": args.title, "content": args.content}, response)


def cmd_improve(service, args):
    """Rewrite a question or answer."""
    response = service.improve_content(args.content, args.kind)
    _emit(args, "improve", {"content": args.content, "kind": args.kind}, response)


def cmd_spam(service, args):
    response = service.detect_spam(args.content)
    _emit(args, "spam", {"content": args.content}, response)


def cmd_tags(service, args):
    response = service.generate_tags(args.content)
    _emit(args, "tags", {"content": args.content}, response)


def cmd_insights(service, args):
    """Platform insights from question titles or a JSON export of questions."""
    if args.input_file:
        with open(args.input_file, 'r', encoding='utf-8') as f:
            questions = json.load(f)
        if not isinstance(questions, list):
            raise ValueError(f"{args.input_file} must contain a JSON list of questions")
    else:
        questions = [{"title": title} for title in (args.titles or [])]
    
    response = service.generate_platform_insights(questions)
    _emit(args, "insights", {"questions": len(questions)}, response)


def cmd_moderate(service, args):
    response = service.moderate_content(args.content, args.kind)
    _emit(args, "moderate", {"content": args.content, "kind": args.kind}, response)


def cmd_chat(service, args):
    """Ask the Stacky assistant."""
    response = service.chat(args.message, args.user, args.reputation)
    _emit(args, "chat", {"message": args.message, "user": args.user}, response)


COMMANDS = {
    "analyze": cmd_analyze,
    "answer": cmd_answer,
    "improve": cmd_improve,
    "spam": cmd_spam,
    "tags": cmd_tags,
    "insights": cmd_insights,
    "moderate": cmd_moderate,
    "chat": cmd_chat,
}


def build_parser():
    parser = argparse.ArgumentParser(description="StackIt AI - Q&A writing and moderation assistant")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    
    def add_command(name, help_text):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('--out', help='Output JSON file')
        return sub
    
    analyze_parser = add_command('analyze', 'Analyze question quality')
    analyze_parser.add_argument('title', help='Question title')
    analyze_parser.add_argument('content', help='Question content')
    
    answer_parser = add_command('answer', 'Generate an answer suggestion')
    answer_parser.add_argument('title', help='Question title')
    answer_parser.add_argument('content', help='Question content')
    
    improve_parser = add_command('improve', 'Improve a question or answer')
    improve_parser.add_argument('content', help='Content to improve')
    improve_parser.add_argument('--kind', choices=IMPROVABLE_KINDS, default='question', help='Content kind')
    
    spam_parser = add_command('spam', 'Detect spam')
    spam_parser.add_argument('content', help='Content to check')
    
    tags_parser = add_command('tags', 'Suggest tags')
    tags_parser.add_argument('content', help='Content to tag')
    
    insights_parser = add_command('insights', 'Generate platform insights')
    insights_parser.add_argument('--titles', nargs='+', help='Recent question titles')
    insights_parser.add_argument('--in', dest='input_file', help='JSON file with a list of questions')
    
    moderate_parser = add_command('moderate', 'Moderate content')
    moderate_parser.add_argument('content', help='Content to moderate')
    moderate_parser.add_argument('--kind', choices=MODERATABLE_KINDS, default='question', help='Content kind')
    
    chat_parser = add_command('chat', 'Chat with the Stacky assistant')
    chat_parser.add_argument('message', help='Message to send')
    chat_parser.add_argument('--user', help='Username of the asking user')
    chat_parser.add_argument('--reputation', type=int, help='Reputation of the asking user')
    
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return
    
    setup_logging()
    
    try:
        service = AIServiceFactory.create()
        COMMANDS[args.command](service, args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
