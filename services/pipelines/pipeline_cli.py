from click import command, echo
from colorama import just_fix_windows_console

from libs.names import logger
from services.pipelines import PROCEDURES


@command
def main() -> None:
    just_fix_windows_console()
    for index, procedure in enumerate(PROCEDURES):
        if index:
            echo()
        logger.info("running %s", procedure.__name__)
        procedure()


if __name__ == "__main__":
    main()
