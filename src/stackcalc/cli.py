import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession

from .logging_config import setup_logging
from .machine import Machine
from .parser import Parser
from .lexer import Lexer


logger = logging.getLogger(__name__)


class InteractiveInput:
    '''
    Lines typed at a prompt_toolkit prompt, until ctrl+d.
    '''

    def __init__(self, prompt, vi_mode=False):
        self.prompt = prompt
        self.vi_mode = vi_mode

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=self.vi_mode,
                                    enable_suspend=True,
                                    # Not persistent. No history file.
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


def _precision(text):
    precision = int(text)
    if precision < 0:
        raise ArgumentTypeError('precision must not be negative')
    return precision


class CLI:
    '''
    Command line interface to the stack calculator.
    '''

    DEFAULT_PROMPT = '> '
    WELCOME = ('Welcome to the stack calculator!\n'
               'Type "help" and hit return to view available commands.')

    def dumper(self):
        '''
        Dump the operation each line parses to, without running it.
        '''
        parser = Parser()
        for line in self.args.expressions:
            print(parser.parse(line))

    def executor(self):
        '''
        Run machine (stack calculator), printing the stack after each line.
        '''
        machine = Machine(precision=self.args.precision)
        parser = Parser()
        if self._interactive():
            print(self.WELCOME)
        for line in self.args.expressions:
            machine.evaluate(parser.parse(line))
            machine.printstack()

    def raw_grammar(self):
        '''
        Print current internally defined number grammar.
        '''
        print(Lexer.NUMBER)

    def _prompting_input(self):
        '''
        Return prompting input, or plain stdin...

        Prompts if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    vi_mode=self.args.vi)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN stack calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='trace parsing and evaluation '
                                               'on stderr')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=_precision,
                                          default=Machine.DEFAULT_PRECISION,
                                          help='decimals shown per number')
        self.argument_parser.add_argument('--vi',
                                          action='store_true',
                                          help='vi key bindings at the prompt')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions',
                                       help='lines to run instead of stdin')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT,
                                       help='prompt even if not on a tty')
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process' command line arguments.

        Ends at end of input or on ctrl+c. Console I/O errors propagate.
        '''
        self.args = self.argument_parser.parse_args(args)
        setup_logging(logging.DEBUG if self.args.verbose else logging.WARNING)
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            logger.debug('Interrupted')
            print()


def main():
    CLI().run()
