from scanparse.util import Colors, Span, split_lines


# Class used to create messages, which can be communicated to the programmer
class Communicator:
    # Maximum number of errors that are spelled out in a single report
    MAX_SHOWN = 10

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        program: str,
        span: Span,
        class_name="CompilerError",
        before: str = "",
        after: str = "",
        n_before: int = 1,
        n_after: int = 1,
        color=Colors.RED,
    ) -> str:
        lines = split_lines(program)
        error_lines = lines[
            max(0, span.start_ln - n_before - 1) : span.end_ln + n_after
        ]
        final_error_lines = []
        start_line_no = max(1, span.start_ln - n_before)
        end_line_no = start_line_no + len(error_lines) - 1
        for i, line in enumerate(error_lines, start=start_line_no):
            # Determine the number of spaces between e.g. '8.' and the code.
            # See the * in the following example:
            #    *8. x + y
            # -> *9. (a * b
            #    10. 12 * c
            padding = " " * (len(str(end_line_no)) - len(str(i)))
            # Spans never cross lines, so only the line of the span is colored
            if i == span.start_ln:
                final_line = (
                    f"-> {padding}{i}. {line[:span.start_col]}"
                    f"{color}{line[span.start_col:span.end_col]}{Colors.ENDC}"
                    f"{line[span.end_col :]}"
                )
            else:
                final_line = f"   {padding}{i}. {line}"
            final_error_lines.append(final_line)

        message = class_name + ": " + before + "\n" + "\n".join(final_error_lines)
        if after:
            message += "\n" + after
        return message

    # Communicates all errors to the programmer
    # In case of any errors, processing stops with an exception of the given stage
    @staticmethod
    def communicate(stage_of_exception) -> None:
        ErrorRaiser.__sort_errors__()

        shown = ErrorRaiser.ERRORS[: Communicator.MAX_SHOWN]
        errors = "\n\n".join(str(error) for error in shown)
        if errors:
            n_omitted = len(ErrorRaiser.ERRORS) - len(shown)
            if n_omitted:
                errors += f"\n\nShowing {len(shown)} errors, omitting {n_omitted} error{'s' if n_omitted > 1 else ''}..."
            raised = list(ErrorRaiser.ERRORS)
            ErrorRaiser.ERRORS.clear()
            raise stage_of_exception(errors, errors=raised)


# Used to store all the accumulated errors
class ErrorRaiser:
    ERRORS = []

    @staticmethod
    def __sort_errors__() -> None:
        from scanparse.error.error import CompilerError

        # First sort on line_no, and then on start of the error in the line
        # If error object has no span attribute, then sort it on top
        ErrorRaiser.ERRORS.sort(
            key=lambda error: (error.span.start_ln, error.span.start_col)
            if isinstance(error, CompilerError)
            else (0, 0)
        )
