"""
Real-Time Object Detection

Live webcam object detection using a MobileNet-SSD Caffe model through the
OpenCV DNN module. Annotated frames are shown in a local window until ESC.
"""

__version__ = "1.0.0"
__license__ = "MIT"
