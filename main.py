"""
JPEG Artifact Simulator
Lossy JPEG-style round trip on RGBA images (colour transform, 4:2:0, 8x8 DCT).
"""

import argparse
import logging
import sys

from models.compression_params import CompressionParams, QuantScaling, BlockPadding
from models.errors import CompressionError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="main.py",
        description="Simulate JPEG compression artifacts on an image."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("image_path", nargs="?", help="input image (PNG, JPEG, ...)")
    source.add_argument("--synthetic", metavar="NAME",
                        help="use a generated image: flat, pixel_checkerboard, checkerboard, "
                             "gradient, chroma_stripes")
    parser.add_argument("-f", "--factor", type=float, default=0.5,
                        help="distortion factor in [0, 1], clamped (default 0.5)")
    parser.add_argument("-o", "--output", default="reconstructed.png", help="output path")
    parser.add_argument("--quality-scaling", action="store_true",
                        help="use the IJG quality curve instead of the linear table scale")
    parser.add_argument("--zero-pad", action="store_true",
                        help="zero-fill partial edge blocks instead of replicating edges")
    parser.add_argument("--subsampling", choices=["4:4:4", "4:2:2", "4:2:0"], default="4:2:0")
    parser.add_argument("--prefilter", action="store_true", help="blur chroma before subsampling")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def run_cli(argv=None) -> int:
    """Run the simulator from the command line. Returns the exit status."""
    from engines.pipeline import compress_reconstruct
    from utils.image_io import load_image, save_image
    from utils.test_images import generate_demo_image, DEMO_IMAGES

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        if args.synthetic:
            print(f"Generating test image: {args.synthetic}")
            image = generate_demo_image(args.synthetic)
            if image is None:
                raise ValueError(
                    f"Unknown synthetic image '{args.synthetic}', choose from {', '.join(DEMO_IMAGES)}"
                )
        else:
            print(f"Loading: {args.image_path}")
            image = load_image(args.image_path)

        params = CompressionParams(
            factor=args.factor,
            scaling=QuantScaling.QUALITY if args.quality_scaling else QuantScaling.LINEAR,
            padding=BlockPadding.ZERO if args.zero_pad else BlockPadding.EDGE,
            subsampling_mode=args.subsampling,
            use_prefilter=args.prefilter,
        )

        print(f"Image: {image.width}x{image.height}")
        print(f"Factor: {params.factor:.3f} ({params.scaling.value} scaling)")

        result = compress_reconstruct(image, params)
        save_image(result.reconstructed_image, args.output)
    except (CompressionError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n=== Results ===")
    print(f"PSNR (Y):   {result.psnr_y:.2f} dB")
    print(f"SSIM (Y):   {result.ssim_y:.4f}")
    print(f"PSNR (RGB): {result.psnr_rgb:.2f} dB")
    print(f"Time:       {result.encode_time_ms + result.decode_time_ms:.2f} ms")
    print(f"\nSaved: {args.output}")
    return 0


def main():
    sys.exit(run_cli())


if __name__ == '__main__':
    main()
