"""Interface en ligne de commande ``ini-io``.

Exemples:
    ini-io show app.ini
    ini-io json app.ini -o app.json
    ini-io get app.ini User Name
    ini-io set app.ini User Age 31
    ini-io rename-section app.ini User Account
"""

import argparse
import sys
from typing import Optional, Sequence

from ini_io.config.settings import IniIOSettings, load_settings
from ini_io.errors.base import ErrorHandlerChain
from ini_io.errors.console_handler import ConsoleErrorHandler
from ini_io.errors.logger_handler import LoggerErrorHandler
from ini_io.fileio.manager import IniFileManager
from ini_io.logging.base import Logger, NullLogger
from ini_io.logging.file_logger import FileLogger
from ini_io.model.section import Section
from ini_io.model.value import Value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ini-io",
        description="Lecture, modification et export de fichiers INI typés",
    )
    parser.add_argument(
        "--config", help="Fichier de paramètres (.toml, .json ou .ini)"
    )
    parser.add_argument("--log-file", help="Fichier de log")
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Affiche le document normalisé")
    show.add_argument("file")

    to_json = sub.add_parser("json", help="Exporte le document en JSON")
    to_json.add_argument("file")
    to_json.add_argument("-o", "--output", help="Fichier JSON de sortie")

    get = sub.add_parser("get", help="Affiche une section ou une entrée")
    get.add_argument("file")
    get.add_argument("section")
    get.add_argument("entry", nargs="?")

    set_ = sub.add_parser("set", help="Modifie ou ajoute une entrée")
    set_.add_argument("file")
    set_.add_argument("section")
    set_.add_argument("entry")
    set_.add_argument("literal", help='Littéral typé : "texte", \'c\', 42')

    rename = sub.add_parser("rename-section", help="Renomme une section")
    rename.add_argument("file")
    rename.add_argument("old_name")
    rename.add_argument("new_name")

    return parser


def _run(
    args: argparse.Namespace, manager: IniFileManager
) -> None:
    if args.command == "show":
        print(manager.load(args.file).to_text())

    elif args.command == "json":
        document = manager.load(args.file)
        if args.output:
            manager.export_json(args.output, document)
        else:
            print(document.to_json(indent=manager.settings.json_indent))

    elif args.command == "get":
        section = manager.load(args.file)[args.section]
        if args.entry is None:
            print(section.to_text())
        else:
            print(section[args.entry].value)

    elif args.command == "set":
        document = manager.load(args.file)
        if args.section not in document:
            document.append(Section(args.section))
        document[args.section].set_value(args.entry, Value.infer(args.literal))
        manager.save(args.file, document)

    elif args.command == "rename-section":
        document = manager.load(args.file)
        document.rename(args.old_name, args.new_name)
        manager.save(args.file, document)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Point d'entrée de la ligne de commande.

    Returns:
        Code de sortie (0 en cas de succès).
    """
    args = build_parser().parse_args(argv)
    errors = ErrorHandlerChain(ConsoleErrorHandler())
    logger: Logger = NullLogger()

    try:
        settings = (
            load_settings(args.config) if args.config else IniIOSettings()
        )
        if args.log_file:
            logger = FileLogger(args.log_file, config=settings)
            errors.add_handler(LoggerErrorHandler(logger))
        _run(args, IniFileManager(logger, settings))
    except Exception as e:
        errors.handle(e)
        return errors.exit_code_for(e)
    finally:
        if isinstance(logger, FileLogger):
            logger.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
