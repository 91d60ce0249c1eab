"""
Gamma-Aware Dither
Ordered blue-noise dithering in linear light, with PNG gamma detection
"""

import logging
import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)

USAGE = """\
Usage: python main.py <image_path> [lossiness] [--gamma G] [--output PATH] [--verbose]
       python main.py --synthetic [gradient|sky|flat] [lossiness] [--output PATH]

lossiness: 0 (lossless for 8-bit color) to 7 (very lossy), default 4
--gamma:   overrides the input's gamma if positive; 1.0 means naive dithering"""


def _pop_option(args, name, default=None):
    if name not in args:
        return default
    i = args.index(name)
    if i + 1 >= len(args):
        raise ValueError(f"{name} needs a value")
    value = args[i + 1]
    del args[i:i + 2]
    return value


def parse_synthetic_args(rest):
    """[key] [lossiness] after --synthetic. Lossiness may be negative; it is clamped later."""
    rest = list(rest)
    key = 'gradient'
    if rest:
        try:
            int(rest[0])
        except ValueError:
            key = rest.pop(0)
    lossiness = int(rest[0]) if rest else 4
    return key, lossiness


def run_cli(argv):
    """Dither one image and report gamma, quality and timing."""
    from models.dither_params import DitherParams
    from engines.pipeline import dither_encoded, dither_image
    from utils.test_images import generate_demo_image
    from utils.image_io import read_bytes, save_image

    args = list(argv)

    if not args or args[0] in ('--help', '-h'):
        print(USAGE)
        return 0

    verbose = '--verbose' in args
    if verbose:
        args.remove('--verbose')
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    gamma = _pop_option(args, '--gamma')
    output_path = _pop_option(args, '--output', 'dithered.png')
    gamma = float(gamma) if gamma is not None else None

    if not args:
        print(USAGE)
        return 1

    if args[0] == '--synthetic':
        key, lossiness = parse_synthetic_args(args[1:])
        image = generate_demo_image(key)
        if image is None:
            print(f"Unknown synthetic image: {key}")
            return 1
        print(f"Generating test image: {key}")
        result = dither_image(image, DitherParams(lossiness=lossiness, gamma=gamma))
    else:
        image_path = args[0]
        lossiness = int(args[1]) if len(args) > 1 else 4
        print(f"Loading: {image_path}")
        result = dither_encoded(read_bytes(image_path), DitherParams(lossiness=lossiness, gamma=gamma))

    h, w = result.dithered_image.shape[:2]
    gamma_source = "override" if result.gamma_overridden else result.gamma_status.value
    print(f"Image: {w}x{h}")
    print(f"Lossiness: {result.lossiness}")
    print(f"Gamma: {result.gamma:.4g} ({gamma_source})")

    print("\n=== Results ===")
    print(f"PSNR:              {result.psnr:.2f} dB")
    print(f"Linear brightness: {result.linear_brightness_error:.5f} max abs error")
    print(f"Distinct levels:   {result.distinct_levels}")
    print(f"Time:              {result.decode_time_ms + result.dither_time_ms:.2f} ms")

    save_image(result.dithered_image, output_path)
    print(f"\nSaved: {output_path}")
    return 0


def main():
    try:
        sys.exit(run_cli(sys.argv[1:]))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
