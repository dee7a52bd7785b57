"""
Main entry point for Real-Time Object Detection.
"""

import sys
import logging
import argparse
from typing import List, Optional

from . import __version__
from .config import load_config, save_example_config


def setup_logging(level: str = "INFO"):
    """
    Setup logging configuration.

    Args:
        level: Logging level
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command line parser.

    Both positionals are optional so that a short command line prints usage
    instead of an argparse error.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog='realtime-detector',
        description='Real-time MobileNet-SSD object detection from the default camera'
    )
    parser.add_argument('weights', nargs='?', help='Path to .caffemodel weights')
    parser.add_argument('prototxt', nargs='?', help='Path to .prototxt network config')
    parser.add_argument(
        '-c', '--config',
        default=None,
        help='Path to optional YAML configuration file'
    )
    parser.add_argument(
        '-d', '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--write-config',
        metavar='PATH',
        help='Write an example configuration file and exit'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.write_config:
        try:
            save_example_config(args.write_config)
        except OSError as e:
            print(f"ERROR: Failed to write configuration: {e}", file=sys.stderr)
            return 1
        print(f"Example configuration written to {args.write_config}")
        return 0

    if args.weights is None or args.prototxt is None:
        parser.print_usage(sys.stdout)
        return 0

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"ERROR: Failed to load configuration: {e}", file=sys.stderr)
        return 1

    # Setup logging
    log_level = "DEBUG" if args.debug else config.logging.level
    setup_logging(log_level)

    logger.info("=" * 70)
    logger.info(f"Real-Time Object Detection v{__version__}")
    logger.info("=" * 70)

    try:
        import cv2
        from .capture import VideoCapture, CameraError
        from .detector import MobileNetSSDDetector
        from .display import FrameDisplay
        from .network import SSDNetwork, NetworkLoadError
        from .pipeline import run_main_loop
        from .utils import get_voc_class_names
    except ImportError as e:
        logger.error(f"Could not load OpenCV: {e}. Make sure opencv-python is installed.")
        return 1

    logger.info(f"OpenCV {cv2.__version__}")

    video_capture = None
    detector = None
    display = None
    loop_started = False

    try:
        logger.info("Loading network...")
        network = SSDNetwork(args.weights, args.prototxt, config.network)
        network.load()
        detector = MobileNetSSDDetector(network)

        logger.info("Initializing video capture...")
        video_capture = VideoCapture()
        video_capture.open()

        display = FrameDisplay(config.display)

        logger.info("Starting real-time detection. Press ESC in the window to exit.")
        loop_started = True
        run_main_loop(video_capture, detector, display, get_voc_class_names())

    except (NetworkLoadError, CameraError) as e:
        logger.error(str(e))
        return 1

    except KeyboardInterrupt:
        if not loop_started:
            logger.error("Interrupted during startup")
            return 1
        logger.info("Interrupted, shutting down...")

    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1

    finally:
        logger.info("Cleaning up...")

        if video_capture is not None:
            video_capture.release()

        if display is not None:
            display.close()

        if detector is not None:
            detector.cleanup()

        logger.info("Shutdown complete")

    return 0


if __name__ == '__main__':
    sys.exit(main())
