"""User-facing text of the interactive session."""

PROMPT = "\nEnter your math question (or type help/exit): "

FAREWELL = "\nThank you for using Math Assistant. Goodbye!"

EMPTY_INPUT_HINT = 'Please enter a math question or type "help" for instructions.'

RETRY_HINT = "Could you please try rephrasing your question?"

NOTHING_CALCULATED = f"\nI couldn't work that one out. {RETRY_HINT}"

MANUAL = """
=== Math Assistant Manual ===
Welcome to the friendly Math Assistant! Here's how to use it:

1. Basic Operations:
   - Addition: 'add 5 and 3' or 'what is 10 plus 20'
   - Multiplication: 'multiply 4 by 6' or 'what is 5 times 3'
   - Combined: 'add 10 and 20, then multiply by 3'

2. Special Commands:
   - 'help' - Show this manual
   - 'exit' - Exit the program
   - 'clear' - Clear the screen

Examples:
   > add 25 and 35, then multiply by 2
   > what is 13 plus 14 times 5

Tip: Use natural language - the assistant understands plain English!

=========================
"""
