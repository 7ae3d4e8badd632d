"""
Spectral Blur Studio
Directional motion blur and Wiener deblurring in the frequency domain
"""

import argparse
import sys
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spectral-blur",
        description="Motion blur (convolution or frequency multiplication) and Wiener deblurring."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("image", nargs="?", help="input image path")
    source.add_argument("--synthetic", metavar="KEY", nargs="?", const="checkerboard",
                        help="use a generated image (checkerboard, text_edges, gradient)")
    parser.add_argument("--direction", default="horizontal", help="horizontal or vertical")
    parser.add_argument("--method", default="convolution",
                        help="convolution, spectral (frequency multiplication) or wiener")
    parser.add_argument("--size", type=int, default=9, help="box kernel length in pixels")
    parser.add_argument("--output", default="result.png",
                        help="output path; wiener appends _k<value> per result")
    parser.add_argument("--reference", help="sharp image to score results against")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _output_path(output: str, k: float) -> str:
    path = Path(output)
    return str(path.with_name(f"{path.stem}_k{k:.3f}{path.suffix}"))


def run_cli(argv=None) -> int:
    """Run the filter described by the command line; returns the exit status."""
    from models.filter_config import FilterConfig, Method
    from engines.pipeline import apply_filter
    from engines.sweep import run_sweep
    from utils.exceptions import FilterError
    from utils.image_io import load_image, save_image
    from utils.logging import get_logger, set_verbose
    from utils.metrics import compute_psnr_ssim, Timer
    from utils.test_images import generate_demo_image

    args = build_parser().parse_args(argv)
    set_verbose(args.verbose)
    logger = get_logger("cli")

    try:
        if args.synthetic:
            image = generate_demo_image(args.synthetic)
            if image is None:
                logger.error("Unknown synthetic image: %s", args.synthetic)
                return 1
        else:
            logger.info("Loading: %s", args.image)
            image = load_image(args.image)
        reference = load_image(args.reference) if args.reference else None

        config = FilterConfig(direction=args.direction, method=args.method, size=args.size)
        print(f"Image:     {image.shape[1]}x{image.shape[0]} {image.dtype}")
        print(f"Method:    {config.method.label} ({config.direction.value}, size {config.size})")

        timer = Timer()
        if config.method is Method.WIENER:
            sweep = run_sweep(image, config.direction, config.size, config.k_values)
            results = []
            for k in config.k_values:
                entry = timer.measure(f"k={k:g}", sweep.run, k)
                results.append((entry.label, _output_path(args.output, k), entry.image))
        else:
            result = timer.measure("filter", apply_filter, image, config.to_mode())
            results = [("Result", args.output, result)]

        print("\n=== Results ===")
        for line, path, result in results:
            if reference is not None:
                scores = compute_psnr_ssim(reference, result)
                line += f"  PSNR {scores['psnr']:.2f} dB  SSIM {scores['ssim']:.4f}"
            save_image(result, path)
            print(f"{line}  -> {path}")
        print(f"Time:      {timer.total_ms:.2f} ms")
    except (FilterError, ValueError) as e:
        logger.error("%s", e)
        return 1

    return 0


def main():
    sys.exit(run_cli())


if __name__ == '__main__':
    main()
