"""
Wordle Engine - Console Entry Point

Drives a single game session from standard input. Each guess is echoed
back as ``letter:STATUS`` tokens.

Commands:
    :new         start a new game
    :lang <code> switch dictionary language (en, fr)
    :quit        exit
"""

from typing import Callable

from .config import Config, WORD_LENGTH, get_config, get_word_statistics
from .models.game import Language
from .models.state import Errored, Lost, Ongoing, Won
from .services.dictionary import load_dictionary
from .services.game_service import GameService, initialize_game_service
from .utils.game_logger import game_logger


def format_attempt(attempt) -> str:
    return ' '.join(f"{letter.char}:{letter.status.value}" for letter in attempt.letters)


def describe(service: GameService, session_id: str) -> str:
    """One-line summary of where the session stands."""
    state = service.get_state(session_id)
    if isinstance(state, Won):
        return f"You won in {len(state.attempts)} attempt(s)! The word was {state.target.upper()}."
    if isinstance(state, Lost):
        return f"Game over. The word was {state.target.upper()}."
    if isinstance(state, Errored):
        return f"Error: {state.message}. Type :new to start again."
    if isinstance(state, Ongoing):
        remaining = service.max_attempts - len(state.attempts)
        return f"[{state.language.display_name}] {remaining} attempt(s) left."
    return ""


def run_console(service: GameService,
                read_line: Callable[[str], str] = input,
                write: Callable[[str], None] = print) -> None:
    """Read commands and guesses until :quit or end of input."""
    session_id = service.create_game()
    write(describe(service, session_id))

    while True:
        try:
            line = read_line("> ")
        except EOFError:
            break

        command = line.strip()
        if not command:
            continue

        if command == ':quit':
            break

        if command == ':new':
            service.start_new_game(session_id)
        elif command.startswith(':lang'):
            code = command[len(':lang'):].strip()
            try:
                language = Language.from_code(code)
            except ValueError as e:
                write(str(e))
                continue
            service.switch_language(session_id, language)
        else:
            state = service.get_state(session_id)
            if isinstance(state, Errored):
                write(describe(service, session_id))
                continue
            if not isinstance(state, Ongoing):
                write("This game is over. Type :new to play again.")
                continue

            state = service.submit_attempt(session_id, line)
            if isinstance(state, Ongoing) and state.last_error is not None:
                write(state.last_error.message)
                continue
            if not isinstance(state, Errored):
                write(format_attempt(state.attempts[-1]))

        write(describe(service, session_id))


def create_service(config_class=Config) -> GameService:
    """Configure logging and initialize the global game service from a configuration class."""
    game_logger.configure(config_class)
    language = Language.from_code(config_class.DEFAULT_LANGUAGE)
    service = initialize_game_service(
        max_attempts=config_class.MAX_ATTEMPTS,
        default_language=language
    )

    game_logger.logger.info(
        f"Wordle engine starting (language={language.value}, max_attempts={service.max_attempts}, "
        f"debug={config_class.DEBUG})"
    )
    if config_class.DEBUG:
        stats = get_word_statistics(load_dictionary(language).words)
        game_logger.logger.debug(f"Dictionary statistics ({language.value}): {stats}")
    return service


def main():
    """Main function to initialize the game service and play in the terminal."""
    try:
        service = create_service(get_config())
        print(f"Guess the {WORD_LENGTH}-letter word in {service.max_attempts} attempts. Commands: :new, :lang <en|fr>, :quit")
        run_console(service)

    except KeyboardInterrupt:
        print("\nBye!")
        game_logger.logger.info("Wordle engine shutting down (KeyboardInterrupt)")
    except Exception as e:
        game_logger.logger.error(f"Error running the game: {e}")
        raise


if __name__ == '__main__':
    main()
