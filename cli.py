#!/usr/bin/env python3
import sys
import argparse
import traceback
from colorama import init as colorama_init, Fore

from commands.fetch  import fetch_main
from commands.detect import detect_main
from core.exceptions import SharecodeError, UsageError
from core.logger import ComponentLogger

def create_parser():
    p = argparse.ArgumentParser(
        prog="sharecode",
        description="sharecode: copy shared code for the current project's language"
    )
    p.add_argument('path', nargs='?',
                   help='Shared-code file, relative to the language directory')
    p.add_argument('--root', default=None,
                   help='Shared-code root (overrides config and $SHARECODE_ROOT)')
    p.add_argument('-c','--config', default=None,
                   help='Path to a YAML config file')
    p.add_argument('-l','--language', default=None,
                   help='Skip detection and use this language (e.g. rust or rs)')
    p.add_argument('-C','--directory', dest='project_dir', default='.',
                   help='Project directory to classify and copy into (default: cwd)')
    p.add_argument('--detect', action='store_true',
                   help='Only print the detected language')
    p.add_argument('-v','--verbose', action='store_true',
                   help='Explain which marker decided the language')
    return p

def run(args) -> int:
    if args.detect:
        return detect_main(project_dir=args.project_dir, config_path=args.config,
                           root=args.root, verbose=args.verbose)
    if not args.path:
        raise UsageError("You're missing arguments: a shared-code path is required")
    return fetch_main(
        args.path,
        config_path = args.config,
        root        = args.root,
        language    = args.language,
        project_dir = args.project_dir,
        verbose     = args.verbose
    )

def report(e: SharecodeError):
    log = ComponentLogger("sharecode")
    log.error(str(e))
    for err in e.context.get('errors', []):
        log.error(f"  - {err}")

def main(argv=None):
    colorama_init(autoreset=True)
    parser = create_parser()
    args   = parser.parse_args(argv)

    try:
        code = run(args)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        report(e)
        sys.exit(e.exit_code)
    except SharecodeError as e:
        report(e)
        sys.exit(e.exit_code)
    except Exception:
        print(Fore.RED + "[ERROR] Unhandled exception:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        sys.exit(1)
    sys.exit(code)

if __name__=='__main__':
    main()
