from django.db import models


class Rating(models.Model):
    """
    One user's rating of one item.

    This table is what the recommender snapshots for every query.
    """
    user = models.CharField(max_length=150)
    item = models.CharField(max_length=200)
    score = models.FloatField()

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["user", "item"]
        unique_together = ("user", "item")

    def __str__(self):
        return f"{self.user} → {self.item} ({self.score})"
