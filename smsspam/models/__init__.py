"""
Classifier builders.

scikit-learn estimators (SVM, naive Bayes, logistic regression) constructed
from config/classifier.yaml.
"""
