from .swap import swap_ranges
from .reverse import reverse_range, reverse_until
from .rotate import forward_rotate, bidirectional_rotate, random_access_rotate
