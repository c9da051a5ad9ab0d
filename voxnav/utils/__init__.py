""" General utilities.

This module contains general utilities used throughout voxnav,
such as integer voxel positions, logging, and locating package data.
"""
