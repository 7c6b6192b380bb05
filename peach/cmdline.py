"""
This is an interpreter for Peach, a little language for fuzzy logic.

For example:

    peach

starts the interactive prompt, while

    peach -e "x:0.8" -e "~x$x"

evaluates each expression in turn and prints the results.

    peach -h

will explain all the arguments.
"""
import sys, argparse, time

PROMPT = "(`) "

HELP = """\
==== Peach (`) : An interpreted language for fuzzy logic ====
One data type: Nonnegative decimal number (stored in base 10, not base 2)
Unary operators
  Negation, possibility, certainty: ~ <> []
  One percent (postfix): %
Binary operators
  Standard arithmetic and comparison: + - * / ^ = ~= < <= > >=
  (- gives the absolute difference)
  Minimum, average, maximum: ! @ #
  Disjunction (sum minus product): $
Operators do not have precedence. Use parentheses for grouping.
(`) [expression]
  Display result of expression
Use "\\" to continue an expression on the next line
(`) p:[expression]
  Assign result of expression to variable p
52 variables are available, represented by the 52 case-sensitive letters
(`) vars
  List the variables assigned so far
(`) clear
  Forget every variable
Leave with an empty line, exit, halt, or quit
"""

QUIT = frozenset(["", "exit", "halt", "quit"])
HELP_WORDS = frozenset(["?", "help"])

parser = argparse.ArgumentParser(
	prog="peach",
	description="Interpreter for the Peach fuzzy-logic language.",
)
parser.add_argument('-e', "--evaluate", action="append", metavar="EXPR", help="Evaluate this line (may be repeated) instead of starting the prompt.")
parser.add_argument('-v', "--verbose", action="count", help="Trace each token and what the expression reduces to.")
parser.add_argument("--precision", type=int, default=28, help="Significant digits of decimal arithmetic (default %(default)s).")

def run(args):
	from .diagnostics import Report
	from .interpreter import Interpreter
	if args.precision < 1:
		parser.error("precision must be at least 1")
	report = Report(verbose=args.verbose)
	interpreter = Interpreter(report=report, precision=args.precision)
	if args.evaluate:
		return evaluate_all(interpreter, args.evaluate)
	else:
		prompt_loop(interpreter)
		return 0

def evaluate_all(interpreter, lines) -> int:
	""" Non-interactive mode. The exit status is 1 if anything went wrong. """
	from .primitive import render
	failed = False
	for text in lines:
		outcome = interpreter.evaluate(text)
		if outcome.error is not None:
			interpreter.report.complain(text, outcome.error, outcome.error_offset)
			failed = True
		elif outcome.has_value:
			print(render(outcome.value))
	return 1 if failed else 0

def read_continuation(text:str) -> str:
	""" A trailing backslash means the line continues on the next one. """
	while text.endswith("\\"):
		text = text[:-1] + input()
	return text

def prompt_loop(interpreter):
	from .primitive import render
	print('Peach (`) : Enter "?" for help.')
	while True:
		try:
			text = input(PROMPT).strip()
			# Commands are whole physical lines, so they never continue.
			command = text.lower()
			if command in QUIT:
				return
			elif command in HELP_WORDS:
				print(HELP, end="")
				continue
			elif command == "vars":
				for letter, value in interpreter.memory.assigned().items():
					print("%s = %s" % (letter, render(value)))
				continue
			elif command == "clear":
				interpreter.memory.reset()
				continue
			text = read_continuation(text)
		except EOFError:
			print()
			return
		started = time.perf_counter()
		outcome = interpreter.evaluate(text)
		elapsed = int((time.perf_counter() - started) * 1000)
		if outcome.error is not None:
			interpreter.report.complain(text, outcome.error, outcome.error_offset, prefix=PROMPT)
		elif outcome.has_value:
			print("%s\t[%d ms]" % (render(outcome.value), elapsed))

def main():
	sys.exit(run(parser.parse_args()))
