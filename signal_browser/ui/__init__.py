"""
Dash presentation layer: layout builders and callback registration.
Everything here is data binding over signal_browser.core.
"""
