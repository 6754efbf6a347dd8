# kubeNs/namespace/picker.py
"""
Interactive selection of one name out of a list.
"""
from abc import ABC, abstractmethod
from typing import Callable, List

from tabulate import tabulate

from kubeNs.errors import SelectionError


class NamespacePicker(ABC):

    @abstractmethod
    def pick_with_default(self, options: List[str], prompt: str, default: str, help_text: str) -> str:
        """Returns the chosen option. Raises SelectionError if nothing was chosen."""
        pass


class ConsolePicker(NamespacePicker):
    """
    Prints the options as a numbered table and reads the choice from the console.

    The user may type a number or a name. An empty answer selects the default,
    '?' shows the help text and 'exit' cancels.
    """

    def __init__(self, input_fn: Callable[[str], str] = input, output_fn: Callable[[str], None] = print):
        self.input_fn = input_fn
        self.output_fn = output_fn

    def pick_with_default(self, options: List[str], prompt: str, default: str, help_text: str) -> str:
        if not options:
            raise SelectionError(prompt, "no options to choose from")

        rows = [[i + 1, name, "(current)" if name == default else ""] for i, name in enumerate(options)]
        self.output_fn(f"🧠 {prompt}")
        self.output_fn(tabulate(rows, tablefmt="plain"))

        has_default = default in options
        question = f"➡️ Select by number or name [{default}]: " if has_default else "➡️ Select by number or name: "

        while True:
            try:
                answer = self.input_fn(question).strip()
            except EOFError as e:
                raise SelectionError(prompt, "selection interrupted") from e

            if not answer:
                if has_default:
                    return default
                self.output_fn("   Please choose one of the options.")
                continue
            if answer == "?":
                self.output_fn(f"   {help_text}")
                continue
            if answer.lower() == "exit":
                raise SelectionError(prompt, "selection cancelled")
            if answer in options:
                return answer
            try:
                selected_index = int(answer) - 1
            except ValueError:
                self.output_fn(f"   '{answer}' is not one of the options.")
                continue
            if 0 <= selected_index < len(options):
                return options[selected_index]
            self.output_fn(f"   Invalid selection. Please enter a number between 1 and {len(options)}.")
