"""SVG optimization through SVGO.

SVGO is a Node.js library. It is run in a ``node`` subprocess that reads a
JSON request ``{"svg": ..., "config": ...}`` from stdin and writes the
optimized SVG to stdout.
"""

import json
import logging
import subprocess

from .config import OptimizerConfig
from .errors import OptimizerError

logger = logging.getLogger(__name__)

SVGO_SCRIPT = """
const { optimize } = require("svgo");
let input = "";
process.stdin.setEncoding("utf8");
process.stdin.on("data", (chunk) => { input += chunk; });
process.stdin.on("end", () => {
  try {
    const { svg, config } = JSON.parse(input);
    process.stdout.write(optimize(svg, config).data);
  } catch (error) {
    process.stderr.write(String(error && error.message ? error.message : error));
    process.exit(1);
  }
});
"""


def optimize_svg(svg_text: str, config: OptimizerConfig) -> str:
    """Optimize SVG text with SVGO.

    Args:
        svg_text: Raw SVG markup.
        config: Optimizer configuration.

    Returns:
        Optimized SVG markup.

    Raises:
        OptimizerError: If node or SVGO is unavailable, times out, or
            rejects the input.
    """
    request = json.dumps({"svg": svg_text, "config": config.to_svgo()})
    logger.debug("Running optimizer with %d plugin(s)", len(config.plugins))
    try:
        result = subprocess.run(
            [config.node, "-e", SVGO_SCRIPT],
            input=request,
            capture_output=True,
            text=True,
            encoding="utf-8",
            timeout=config.timeout,
        )
    except FileNotFoundError as e:
        raise OptimizerError(f"Optimizer runtime not found: {config.node}") from e
    except subprocess.TimeoutExpired as e:
        raise OptimizerError(f"Optimizer timed out after {config.timeout:g}s") from e

    if result.returncode != 0:
        message = result.stderr.strip() or f"exit status {result.returncode}"
        raise OptimizerError(f"Optimizer failed: {message}")
    if not result.stdout.strip():
        raise OptimizerError("Optimizer returned no output")
    return result.stdout
