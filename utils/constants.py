"""Filter defaults."""

# Box length used by the Wiener sweep and as the blur default
DEFAULT_KERNEL_SIZE = 9

# k = 0 first, then x10 steps from 0.001 up to 1.0 inclusive
WIENER_K_SWEEP = (0.0, 0.001, 0.01, 0.1, 1.0)

METHOD_LABELS = {
    'convolution': 'Convolution',
    'spectral': 'Frequency multiplication',
    'wiener': 'Wiener filter',
}
