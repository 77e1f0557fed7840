# ABOUTME: Skyline weather widget package.
# ABOUTME: City lookup with current conditions and a 7-day forecast from Open-Meteo.
