import sys
from cb.common.logger import log
from cb.ui.app import main

# Entry point for `python -m cb [config.json]` and the `counterblock` script
def run(argv=None) -> None:
    try:
        main(argv)
    except SystemExit:
        raise
    except Exception:
        log.exception(f"Preview crashed with args {argv if argv is not None else sys.argv[1:]}, exiting")
        sys.exit(1)

if __name__ == "__main__":
    run()
