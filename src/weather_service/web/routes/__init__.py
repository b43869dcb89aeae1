# ABOUTME: Route modules for the weather service API.
