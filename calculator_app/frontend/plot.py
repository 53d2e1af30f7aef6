"""Single-point scatter plot of a calculation result."""
import base64
import io
import sys

from matplotlib.figure import Figure

FLOAT_MAX: float = sys.float_info.max


def axis_limits(value: float) -> tuple[float, float]:
    """
    Compute finite axis limits centered on a value.

    The span is a tenth of the value (at least 0.1) and both limits are clamped to the float range.

    :param float value: Finite coordinate to frame

    :return: Lower and upper axis limits
    :rtype: tuple[float, float]
    """
    span: float = max(abs(value), 1.0) * 0.1
    lower: float = max(value - span, -FLOAT_MAX)
    upper: float = min(value + span, FLOAT_MAX)
    return lower, upper


def render_result_plot(result: float) -> str:
    """
    Render a scatter plot with one point at (result, result).

    A standalone Figure is used instead of pyplot so concurrent requests share no global state.

    :param float result: Finite calculation result to plot

    :return: PNG image encoded as base64 text
    :rtype: str
    :raises ValueError: If matplotlib cannot lay out the axes for this value
    :raises OverflowError: If a tick position overflows the float range
    """
    fig = Figure(figsize=(5, 4), layout="constrained")
    ax = fig.add_subplot()
    ax.scatter([result], [result], color="r", s=60)

    # Autoscaling overflows near the float maximum
    lower, upper = axis_limits(result)
    ax.set_xlim(lower, upper)
    ax.set_ylim(lower, upper)

    ax.grid(visible=True, which="major", axis="both", linestyle="-", color="gray", lw=0.5)
    ax.set_title("Result")
    ax.set_xlabel("x")
    ax.set_ylabel("y")

    buffer = io.BytesIO()
    fig.savefig(buffer, format="png")
    return base64.b64encode(buffer.getvalue()).decode("ascii")
