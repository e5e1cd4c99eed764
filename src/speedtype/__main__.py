from argparse import ArgumentParser

from .lib.console import GameConsole
from .lib.sentence_provider import SentenceProvider
from .lib.util import init_logger, load_setting
from .services.game import GameService
from .types.cli import CLIArgs


def main():
    parser = ArgumentParser("Speed Type",
                            usage="Starts the typing game",
                            description="Terminal typing speed game")
    parser.add_argument("-c",
                        "--setting",
                        help="Path to setting.yaml file",
                        dest="setting",
                        default="setting.yaml")
    args = parser.parse_args(namespace=CLIArgs)

    setting = load_setting(args.setting)
    init_logger(setting)

    sentence_provider = SentenceProvider(setting)
    sentence_provider.load_sentences()

    service = GameService(sentence_provider=sentence_provider)
    GameConsole(setting=setting, service=service).show_menu()


if __name__ == "__main__":
    main()
