"""Pipeline stages for adding furniture to a room.

  config  : room bounds and search grid shared by every stage
  placer  : bounding boxes, collision/boundary test, free-slot search
"""
