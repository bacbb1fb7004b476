from .encodings import (ensure_binary, bytes2ascii, ascii2bytes, bn2bytes,
                        bytes2bn, point2bytes, bytes2point, counter2bytes,
                        pet2ascii, ascii2pet)
from .profiling import Profiler, profiled
