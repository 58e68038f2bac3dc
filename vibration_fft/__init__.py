"""Vibration FFT monitoring library.

This package analyzes the four channels of pre-computed FFT magnitude
arrays published by a vibration sensor endpoint. It derives per-channel
statistics and spectral peaks, and maps the spectra and their peaks into
chart coordinates for a dashboard.

The processing consists of:
1. Payload decoding and validation into four magnitude arrays
2. Statistics (min, max, mean, RMS) and top-5 peak detection per channel
3. Mapping of each spectrum and its peaks onto one shared plot scale
4. Axis tick generation for the same scale
5. Optional matplotlib rendering of the mapped geometry

Example:
    Basic usage through the pipeline API:

    >>> from vibration_fft.pipeline import process_payload
    >>> from vibration_fft.models import MonitorParameters
    >>>
    >>> # Analyze one refresh of the endpoint with default parameters
    >>> dashboard = process_payload(response_json, MonitorParameters())
    >>> dashboard.channel("Channel1").statistics.peaks
"""
