from . import base, knn, nbayes, tree
from .base import Classifier
from .knn import KNN
from .nbayes import NaiveBayes
from .tree import DecisionTree
