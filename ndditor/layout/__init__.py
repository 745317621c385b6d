"""Sizes, borders, containers, boxes and drawing helpers for laying out the screen."""